from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from maxsat.core.errors import ValidationError

# --- Literals ---

class Lit(BaseModel):
    """A named variable together with its polarity."""
    model_config = ConfigDict(frozen=True)

    var: str
    neg: bool = False

    @field_validator('var')
    @classmethod
    def validate_var(cls, v: str) -> str:
        if not v:
            raise ValueError("Variable name cannot be empty")
        return v

    def negation(self) -> "Lit":
        return Lit(var=self.var, neg=not self.neg)

    def __str__(self) -> str:
        return f"~{self.var}" if self.neg else self.var

# --- Strength ---

class Hard(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["hard"] = "hard"

class Soft(BaseModel):
    """
    A constraint that may be violated at the cost of its weight.
    A weight of 0 makes the constraint behave exactly like a hard one.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["soft"] = "soft"
    weight: int = Field(default=1, ge=0)

Strength = Annotated[Union[Hard, Soft], Field(discriminator="kind")]

def strength_from_weight(weight: int) -> Union[Hard, Soft]:
    """Maps the integer convention (0 = hard, otherwise soft) to a Strength."""
    if weight == 0:
        return Hard()
    return Soft(weight=weight)

# --- Constraint ---

class Constraint(BaseModel):
    """
    Pseudo-Boolean constraint: sum(coefficients[i] * literals[i]) >= at_least.
    Without coefficients every literal counts 1 (clause or cardinality form).
    """
    model_config = ConfigDict(frozen=True)

    literals: List[Lit]
    coefficients: Optional[List[int]] = None
    at_least: int = 1
    strength: Strength = Field(default_factory=Hard)

    @model_validator(mode='after')
    def validate_coefficients(self) -> 'Constraint':
        if self.coefficients is not None and len(self.coefficients) != len(self.literals):
            raise ValueError(
                f"coefficients length {len(self.coefficients)} does not match "
                f"literals length {len(self.literals)}"
            )
        return self

    @property
    def weight(self) -> int:
        if isinstance(self.strength, Soft):
            return self.strength.weight
        return 0

    @property
    def is_soft(self) -> bool:
        return self.weight != 0

def parse_constraints(items: Iterable[Union[Constraint, Dict[str, Any]]]) -> List[Constraint]:
    """
    Validates a sequence of constraints or constraint dicts.
    Raises ValidationError naming the first offending position.
    """
    out = []
    for i, item in enumerate(items):
        if isinstance(item, Constraint):
            out.append(item)
            continue
        try:
            out.append(Constraint.model_validate(item))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid constraint at position {i}: {e}")
    return out

# --- Builders ---

def var(name: str) -> Lit:
    return Lit(var=name)

def hard_clause(*lits: Lit) -> Constraint:
    return Constraint(literals=list(lits), at_least=1)

def soft_clause(*lits: Lit) -> Constraint:
    return weighted_clause(lits, 1)

def weighted_clause(lits: Sequence[Lit], weight: int) -> Constraint:
    return Constraint(literals=list(lits), at_least=1, strength=strength_from_weight(weight))

def hard_pb(lits: Sequence[Lit], coeffs: Sequence[int], at_least: int) -> Constraint:
    return weighted_pb(lits, coeffs, at_least, 0)

def soft_pb(lits: Sequence[Lit], coeffs: Sequence[int], at_least: int) -> Constraint:
    return weighted_pb(lits, coeffs, at_least, 1)

def weighted_pb(lits: Sequence[Lit], coeffs: Sequence[int], at_least: int, weight: int) -> Constraint:
    return Constraint(
        literals=list(lits),
        coefficients=list(coeffs),
        at_least=at_least,
        strength=strength_from_weight(weight),
    )

def at_least(lits: Sequence[Lit], k: int, weight: int = 0) -> Constraint:
    """Cardinality constraint: at least k of lits must hold."""
    return Constraint(literals=list(lits), at_least=k, strength=strength_from_weight(weight))
