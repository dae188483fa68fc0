from .validator import RuleSet, ValidationResult, Validator, not_blank

__all__ = [
    "RuleSet",
    "ValidationResult",
    "Validator",
    "not_blank",
]
