from workout_engine.validation.service import ValidationService

__all__ = ["ValidationService"]
