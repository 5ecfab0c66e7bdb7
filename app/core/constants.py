"""Core constants: field limits and validation messages.

Single source of truth for messages returned to clients (DRY). The message
texts are a stable contract consumed by the front-end.
"""

SUMMARY_MAX_LENGTH = 256


class ValidationMessages:
    """Validation messages keyed by rule (summary/status)."""

    SUMMARY_REQUIRED = "概要は必須です"
    SUMMARY_SIZE = f"概要は{SUMMARY_MAX_LENGTH}文字以内で入力してください"

    STATUS_REQUIRED = "ステータスは必須です"
    STATUS_PATTERN = "ステータスはTODO, DOING, DONEのいずれかで指定してください"


VALIDATION_FAILED_MESSAGE = "Validation failed"
