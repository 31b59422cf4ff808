"""Member References: name a property by calling its accessor on a stand-in.

Invariants:
    - A proxy stub NEVER runs the bean's code: it records a handle and returns it
    - One proxy class per Outline; one CallRecorder per members() call
    - Unknown public attributes raise UnknownMemberError immediately
    - capture() resolves to the LAST call the function made on its proxy

Design Decisions:
    - Proxy class synthesized with type() instead of subclassing the bean: no
      __init_subclass__ hooks, no inherited real methods, no instance of the bean created
    - Arguments passed to stubs are ignored: only the identity of the called method matters
"""

from dataclasses import dataclass
from typing import Any, Callable

from beanoutline.core.errors import ErrorContext, UnknownMemberError
from beanoutline.core.method_catalog import MethodDescriptor
from beanoutline.core.property_model import PropertyDescriptor


@dataclass(frozen=True)
class MemberHandle:
    """Opaque reference to a method (and its property, if it is an accessor)."""
    method: MethodDescriptor
    property: PropertyDescriptor | None = None


class CallRecorder:
    """Remembers which stubs were invoked on one proxy instance."""

    __slots__ = ("calls",)

    def __init__(self):
        self.calls: list[MemberHandle] = []

    def record(self, handle: MemberHandle) -> None:
        self.calls.append(handle)

    @property
    def last(self) -> MemberHandle | None:
        return self.calls[-1] if self.calls else None


class MemberProxy:
    """Base of every synthesized proxy class."""

    __slots__ = ("_recorder",)
    _type_name = "?"

    def __init__(self, recorder: CallRecorder | None = None):
        self._recorder = recorder or CallRecorder()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        raise UnknownMemberError(name, ErrorContext(type_name=self._type_name))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} calls={len(self._recorder.calls)}>"


def synthesize_member_proxy(
    type_name: str,
    methods: tuple[MethodDescriptor, ...],
    by_method: dict[MethodDescriptor, PropertyDescriptor],
) -> type[MemberProxy]:
    """Build a proxy class exposing one recording stub per public method."""
    class_name = f"{type_name}Members"
    namespace: dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": class_name,
        "_type_name": type_name,
    }
    for method in methods:
        namespace[method.name] = _stub(MemberHandle(method, by_method.get(method)))
    return type(class_name, (MemberProxy,), namespace)


def _stub(handle: MemberHandle) -> Callable[..., MemberHandle]:
    def stub(self, *args, **kwargs):
        self._recorder.record(handle)
        return handle

    stub.__name__ = handle.method.name
    return stub


def capture(proxy_type: type[MemberProxy], fn: Callable[[Any], Any]) -> MemberHandle:
    """Run fn once against a fresh proxy and return the handle it called last."""
    recorder = CallRecorder()
    fn(proxy_type(recorder))
    if recorder.last is None:
        raise UnknownMemberError(
            "<no member call captured>",
            ErrorContext(type_name=proxy_type._type_name),
        )
    return recorder.last
