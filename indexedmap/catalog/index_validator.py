from typing import Any


class IndexValidator:
    """🔍 Validates index registrations before they reach the registry.

    🏷️ Checks index names are usable strings
    🏭 Checks key factories are callable
    🔑 Checks derived keys produced by key factories are strings
    """

    def __init__(self):
        """
        🎬 Initialize validator with empty error list.
        """
        self.validation_errors: list[str] = []

    def validate_index_creation(self, index_name: Any, key_factory: Any) -> bool:
        """
        🔍 Validate that a new index can be created.

        Duplicate names are not checked here; the registry owns that rule.

        Args:
            index_name: Proposed index name
            key_factory: Proposed value -> derived key callable

        Returns:
            True if valid, False otherwise
        """
        self.validation_errors.clear()

        if not isinstance(index_name, str):
            self.validation_errors.append(
                f"Index name must be a string, got {type(index_name).__name__}")
        elif not index_name.strip():
            self.validation_errors.append("Index name must not be empty or whitespace")

        if key_factory is None:
            self.validation_errors.append("Key factory is required")
        elif not callable(key_factory):
            self.validation_errors.append(
                f"Key factory must be callable, got {type(key_factory).__name__}")

        return len(self.validation_errors) == 0

    def validate_derived_key(self, index_name: str, derived_key: Any) -> bool:
        """
        🔑 Validate a key produced by an index's key factory.

        Returns:
            True if the derived key is a string
        """
        self.validation_errors.clear()

        if not isinstance(derived_key, str):
            self.validation_errors.append(
                f"Key factory for index '{index_name}' returned "
                f"{type(derived_key).__name__}, expected str")

        return len(self.validation_errors) == 0

    def get_validation_errors(self) -> list[str]:
        """Get list of validation errors from last validation."""
        return self.validation_errors.copy()
