class VisibilityRule:
    """
    Decides whether a button is rendered for a given row.

    A rule is either static (always or never visible) or wraps a predicate
    called as ``predicate(model, key, index)`` for every row.

    Usage:
        VisibilityRule(static=False)
        VisibilityRule(predicate=lambda model, key, index: model.is_editable)
    """
    __slots__ = ('static', 'predicate')

    def __init__(self, static=True, predicate=None):
        self.static = static
        self.predicate = predicate

    def __repr__(self):
        if self.predicate is not None:
            return f"VisibilityRule(predicate={self.predicate!r})"
        return f"VisibilityRule(static={self.static!r})"

    @classmethod
    def coerce(cls, value):
        """Turn a configured value (bool, callable, None or rule) into a rule."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if callable(value):
            return cls(predicate=value)
        return cls(static=bool(value))

    def is_visible(self, model, key, index) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(model, key, index))
        return self.static


ALWAYS_VISIBLE = VisibilityRule()


def resolve_visibility(rules, name, model, key, index) -> bool:
    """Return whether button `name` is visible for the row; missing rules mean visible."""
    return rules.get(name, ALWAYS_VISIBLE).is_visible(model, key, index)
