"""
Key-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations, selected by a dispatch key that
is computed from the call itself.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You create a builder with a key function ``key_fn(self, *args, **kwargs)``.
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, KeyVal)
- At runtime, the wrapper computes the key for the current call and
  dispatches to the registered implementation that matches it.

Intended use-cases
------------------
- Selecting a kernel by operand ranks (e.g. vector·vector vs matrix·matrix)
  without large if/elif chains.
- Keeping per-case behaviors isolated as separate functions for readability.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Sub-methods are called like normal instance methods:
  ``sub_method(self, *args, **kwargs)``.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapException = Union[
    BaseException,
    Type[BaseException],
    Callable[..., BaseException],
]
"""
What to raise when no control path matches: an exception instance, an
exception class, or a factory ``(method, self, *args, **kwargs) -> exception``.
"""


def create_path_builder(
    key_fn: Callable[..., Hashable],
) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapException]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register keyed
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder(lambda self, other: other.kind)

        class MyClass:
            def foo(self, other) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, other) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, other) -> int:
            ...

    When `MyClass.foo(other)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `key_fn(self, other)`.

    Parameters
    ----------
    key_fn : Callable[..., Hashable]
        Computes the dispatch key from the receiver and the call arguments.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, key, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control path
        and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "KeyVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, key) to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        key: Hashable,
        trap_exception: Optional[TrapException] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for keyed dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        key : Hashable
            The key value that selects the decorated implementation.
        trap_exception : Optional[TrapException]
            Controls what happens when no control path matches the call:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception instance or class, the wrapper raises it.
            - If any other callable, it is invoked as
              `trap_exception(method, self, *args, **kwargs)` and the
              exception it returns is raised.

            The most recent non-None `trap_exception` registered for a method
            is the one used.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that registers `sub_method` for `(cls, method, key)`.

        Raises
        ------
        TypeError
            If `key` is not hashable.
        """
        try:
            hash(key)
        except TypeError:
            raise TypeError(
                f"The argument for 'key' must be hashable. Got {repr(key)}"
            )

        base = getattr(method, "__control_path_base__", method)
        smk: MethodKey = MethodKey(cls.__name__, base.__name__, key)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured key
            and (re)install the dispatcher wrapper on `cls`.
            """
            methods_map[smk] = sub_method

            previous = getattr(cls, base.__name__, None)
            trap = trap_exception
            if trap is None and previous is not None:
                trap = getattr(previous, "__control_path_trap__", None)

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the call key.
                """
                cur = MethodKey(cls.__name__, base.__name__, key_fn(self, *args, **kwargs))
                if sm := methods_map.get(cur):
                    return sm(self, *args, **kwargs)
                if trap is None:
                    raise NotImplementedError(
                        "Missing control path (key={}) for {}".format(
                            repr(cur.KeyVal), repr(base)
                        )
                    )
                if isinstance(trap, BaseException) or (
                    isinstance(trap, type) and issubclass(trap, BaseException)
                ):
                    raise trap
                raise trap(base, self, *args, **kwargs)

            wrapper.__control_path_base__ = base
            wrapper.__control_path_trap__ = trap
            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
