class MetaCraftError(Exception):
    """Base error for metacraft."""


class InvalidColorError(MetaCraftError, ValueError):
    """A colour string is not a 3- or 6-digit hex value."""

    def __init__(self, value: str):
        super().__init__(f"not a hex colour: {value!r}")
        self.value = value


class UnknownFieldError(MetaCraftError, KeyError):
    """A field key outside the MetaConfig schema."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown field: {self.key!r}"
