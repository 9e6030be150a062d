"""Variable bindings for one PanLang session."""


class Environment:
    """Mutable mapping of variable name to integer value. Owned by a single Session; strings are never stored."""

    def __init__(self):
        self.bindings = {}

    def set(self, name, value):
        """Binds name to value, overwriting any previous binding."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"environment only holds integers, got {type(value).__name__}")
        self.bindings[name] = value

    def get(self, name, default=None):
        """Returns the value bound to name, or default if name is unbound."""
        return self.bindings.get(name, default)

    def reset(self):
        """Drops every binding."""
        self.bindings = {}

    def items(self):
        return self.bindings.items()

    def __contains__(self, name):
        return name in self.bindings

    def __len__(self):
        return len(self.bindings)

    def __repr__(self):
        return f"Environment({self.bindings})"
