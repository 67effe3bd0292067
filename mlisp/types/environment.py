"""Runtime environment for mlisp.

The Environment is an explicit stack of frames. Each frame maps a name to a
Binding (parameter names + body). Lookup walks the stack from the innermost
frame outwards, so a called function sees every frame that is live at call
time, including its caller's locals.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from mlisp import Expr
from mlisp.errors import ScopeError
from mlisp.types.expr import Binding

Frame = dict[str, Binding]


class Environment:
    """Stack of name -> Binding frames."""

    __slots__ = ("contexts",)

    def __init__(self, contexts: Optional[list[Frame]] = None):
        self.contexts: list[Frame] = contexts if contexts is not None else []

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    @classmethod
    def default(cls) -> Environment:
        """A fresh environment with one frame seeding the boolean encodings."""
        defaults: Frame = {
            "False": Binding((), ()),
            "True": Binding((), (1.0,)),
        }
        return cls([defaults])

    @classmethod
    def from_vars(cls, pairs: Iterable[tuple[str, Expr]]) -> Environment:
        """Build a one-frame environment holding the given variables."""
        env = cls.empty()
        env.push_context()
        for name, expr in pairs:
            env.add_var(name, expr)
        return env

    def lookup(self, name: str) -> Optional[Binding]:
        """Return the binding of `name` in the innermost frame that has it."""
        for frame in reversed(self.contexts):
            binding = frame.get(name)
            if binding is not None:
                return binding
        return None

    def contains_key(self, name: str) -> bool:
        return any(name in frame for frame in self.contexts)

    def push_context(self) -> None:
        self.contexts.append({})

    def pop_context(self) -> None:
        """Drop the innermost frame.

        Raises ScopeError if there is no frame to pop.
        """
        if not self.contexts:
            raise ScopeError("Environment has no context to pop.")
        self.contexts.pop()

    def add_var(self, name: str, value: Expr) -> None:
        if not self.contexts:
            raise ScopeError("Environment has no context to add to.")
        self.contexts[-1][name] = Binding((), value)

    def add_fn(self, name: str, params: Iterable[str], body: Expr) -> None:
        if not self.contexts:
            raise ScopeError("Environment has no context to add to.")
        self.contexts[-1][name] = Binding(tuple(str(p) for p in params), body)

    def num_contexts(self) -> int:
        return len(self.contexts)

    @staticmethod
    def _write_frame(frame: Frame, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for name, (params, body) in frame.items():
            if not first:
                buffer.write(", ")
            if params:
                buffer.write(f"{name}({' '.join(params)}): {body!r}")
            else:
                buffer.write(f"{name}: {body!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for outer frames."""
        with StringIO() as buffer:
            if self.contexts:
                self._write_frame(self.contexts[-1], buffer)
                if len(self.contexts) > 1:
                    buffer.write(" -> ...")
            else:
                buffer.write("{}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            chain = []
            for frame in reversed(self.contexts):
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
