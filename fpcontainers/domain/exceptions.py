"""Container-level exceptions.

Ordinary absent or failure states are represented by values, not raised.
These exceptions signal programmer errors only.
"""


class ContainerError(Exception):
    """Base exception for all container errors."""
    pass


class WrongVariantError(ContainerError):
    """Raised when a payload accessor is invoked on the variant that has no payload."""

    def __init__(self, variant: str, accessor: str):
        super().__init__(f"{variant}.{accessor}()")
        self.variant = variant
        self.accessor = accessor
