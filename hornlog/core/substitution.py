"""
Substitutions: the state that unification and search pass around.

A Substitution maps Variables to the terms (or predicates) they are bound
to. Bindings may chain -- {X: Y, Y: alice} -- and are resolved by walking,
never flattened on insert.

Substitutions are persistent. extend() copies the existing bindings into
a new Substitution and adds one more; the receiver is left untouched.
The search engine hands the same parent substitution to several branches,
so nothing here mutates in place.
"""


def _is_variable(expr) -> bool:
    return getattr(expr, "is_variable", False)


class Substitution:
    """An immutable-after-construction mapping Variable -> Unifiable."""

    __slots__ = ("_bindings",)

    def __init__(self, bindings=None):
        self._bindings = {}
        if bindings:
            for variable, value in dict(bindings).items():
                self._check_binding(variable, value)
                self._bindings[variable] = value

    @staticmethod
    def _check_binding(variable, value):
        if variable is None or value is None:
            raise ValueError("Bindings need both a variable and a value")
        if not _is_variable(variable):
            raise TypeError(f"Only variables can be bound, got {variable!r}")

    def extend(self, variable, value) -> "Substitution":
        """New substitution with every current binding plus variable -> value."""
        self._check_binding(variable, value)
        if variable in self._bindings:
            raise ValueError(f"{variable} is already bound to {self._bindings[variable]}")
        extended = Substitution()
        extended._bindings = dict(self._bindings)
        extended._bindings[variable] = value
        return extended

    def is_bound(self, variable) -> bool:
        return variable in self._bindings

    def get_binding(self, variable):
        """The value variable is directly bound to. Unbound variables are an error."""
        if variable is None:
            raise ValueError("Cannot look up the binding of None")
        try:
            return self._bindings[variable]
        except KeyError:
            raise ValueError(f"{variable} is not bound in {self}") from None

    def is_ground(self) -> bool:
        """No bound value is itself a bare variable."""
        return not any(_is_variable(value) for value in self._bindings.values())

    def walk(self, expr):
        """Follow variable-to-value chains until reaching a non-variable or an unbound variable."""
        while _is_variable(expr) and expr in self._bindings:
            expr = self._bindings[expr]
        return expr

    def resolve(self, expr):
        """Apply this substitution to expr all the way down."""
        return expr.replace_variables(self)

    def restrict(self, variables) -> dict:
        """
        Map each of the given variables to its fully resolved value.

        Unbound variables map to themselves. Used to read an answer off a
        solution in terms of the query's own variables.
        """
        return {variable: self.resolve(variable) for variable in variables}

    @property
    def bindings(self) -> dict:
        return dict(self._bindings)

    @staticmethod
    def unify_all(first, second, *rest):
        """
        Unify several expressions, starting from the identity substitution.

        first is unified with second, then every remaining argument is
        unified with first (not with its left neighbour), threading the
        accumulated substitution. Returns None as soon as one step fails.
        """
        from .unification import unify

        if first is None or second is None or any(r is None for r in rest):
            raise ValueError("unify_all arguments cannot be None")

        theta = unify(first, second, Substitution())
        for other in rest:
            if theta is None:
                return None
            theta = unify(first, other, theta)
        return theta

    def __len__(self):
        return len(self._bindings)

    def __iter__(self):
        return iter(self._bindings)

    def __contains__(self, variable):
        return variable in self._bindings

    def __eq__(self, other):
        return isinstance(other, Substitution) and self._bindings == other._bindings

    __hash__ = None

    def __repr__(self):
        # {value/variable}, read "value for variable"
        pairs = ", ".join(f"{value}/{variable}" for variable, value in self._bindings.items())
        return "{" + pairs + "}"
