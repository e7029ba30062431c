"""
validation
----------
Processor interface and validator handles.
"""
from markup_validator.validation.base import Processor, ValidationResult, Validator

__all__ = ["Processor", "ValidationResult", "Validator"]
