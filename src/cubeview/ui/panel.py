"""Widget-free model of the debug panel: a root, named folders, typed fields.

Fields never touch the objects they edit directly.  Each one is built
from a ``getter`` returning the current value and a ``setter`` command
that applies an edit; :class:`~cubeview.ui.inspector_panel.InspectorPanel`
renders the model with Qt widgets and forwards user input to
:meth:`Field.set`.
"""

import logging
from typing import Any, Callable, Iterator, Optional

from cubeview.core.math_utils import clamp

logger = logging.getLogger(__name__)

Getter = Callable[[], Any]
Setter = Callable[[Any], Optional[bool]]


class ReadOnlyFieldError(AttributeError):
    """Raised when setting a field that has no setter."""


class Field:
    """A named, editable value inside a :class:`Folder`.

    A setter may return ``False`` to reject a value; the change callbacks
    then do not fire.
    """

    kind = "field"

    def __init__(self, name: str, getter: Getter, setter: Optional[Setter] = None) -> None:
        self.name = name
        self._getter = getter
        self._setter = setter
        self._callbacks: list[Callable[[Any], None]] = []

    @property
    def value(self) -> Any:
        return self._getter()

    @property
    def read_only(self) -> bool:
        return self._setter is None

    def on_change(self, callback: Callable[[Any], None]) -> "Field":
        """Register *callback(value)*, called after every accepted edit."""
        self._callbacks.append(callback)
        return self

    def set(self, value: Any) -> bool:
        """Apply an edit coming from the widget. Returns whether it was accepted."""
        if self._setter is None:
            raise ReadOnlyFieldError(f"field '{self.name}' is read-only")
        value = self.coerce(value)
        if self._setter(value) is False:
            return False
        for callback in self._callbacks:
            callback(value)
        return True

    def coerce(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class NumberField(Field):
    """Numeric field, optionally limited to ``[minimum, maximum]`` in ``step`` increments."""

    kind = "number"

    def __init__(
        self,
        name: str,
        getter: Getter,
        setter: Optional[Setter] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        step: Optional[float] = None,
    ) -> None:
        super().__init__(name, getter, setter)
        self.minimum = minimum
        self.maximum = maximum
        self.step = step

    @property
    def decimals(self) -> int:
        """Digits after the decimal point implied by ``step``."""
        if not self.step:
            return 2
        text = f"{self.step:g}"
        return len(text.split(".")[1]) if "." in text else 0

    def coerce(self, value: Any) -> float:
        value = float(value)
        if self.step:
            base = self.minimum or 0.0
            value = base + round((value - base) / self.step) * self.step
            value = round(value, self.decimals)
        lo = self.minimum if self.minimum is not None else value
        hi = self.maximum if self.maximum is not None else value
        return clamp(value, lo, hi)


class BoolField(Field):
    kind = "bool"

    def coerce(self, value: Any) -> bool:
        return bool(value)


class TextField(Field):
    kind = "text"

    def coerce(self, value: Any) -> str:
        return str(value)


class ChoiceField(Field):
    """Enumerated field.

    The widget transports a choice as the string form of its code, so the
    setter receives e.g. ``"1"`` for ``{"BackSide": 1}`` and must parse it.
    """

    kind = "choice"

    def __init__(
        self,
        name: str,
        choices: dict[str, int],
        getter: Getter,
        setter: Optional[Setter] = None,
    ) -> None:
        super().__init__(name, getter, setter)
        self.choices = dict(choices)

    @property
    def current_key(self) -> Optional[str]:
        value = self.value
        for key, code in self.choices.items():
            if value is not None and int(code) == int(value):
                return key
        return None

    def select(self, key: str) -> bool:
        """Pick the choice named *key*, as a combo box would."""
        if key not in self.choices:
            raise KeyError(f"'{key}' is not a choice of field '{self.name}'")
        return self.set(str(int(self.choices[key])))

    def coerce(self, value: Any) -> str:
        raw = str(value)
        if raw not in {str(int(code)) for code in self.choices.values()}:
            raise ValueError(f"{raw!r} is not a valid code for field '{self.name}'")
        return raw


class ColorField(Field):
    """Color field; values travel as ``#rrggbb`` strings."""

    kind = "color"

    def coerce(self, value: Any) -> str:
        return str(value)


class Folder:
    """A named group of fields."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._fields: list[Field] = []

    # ── Field registration ──

    def add_number(self, name, getter, setter=None, minimum=None, maximum=None, step=None) -> NumberField:
        return self._register(NumberField(name, getter, setter, minimum, maximum, step))

    def add_bool(self, name, getter, setter=None) -> BoolField:
        return self._register(BoolField(name, getter, setter))

    def add_text(self, name, getter, setter=None) -> TextField:
        return self._register(TextField(name, getter, setter))

    def add_choice(self, name, choices, getter, setter=None) -> ChoiceField:
        return self._register(ChoiceField(name, choices, getter, setter))

    def add_color(self, name, getter, setter=None) -> ColorField:
        return self._register(ColorField(name, getter, setter))

    # ── Queries ──

    def field(self, name: str) -> Field:
        for f in self._fields:
            if f.name == name:
                return f
        raise KeyError(f"folder '{self.name}' has no field '{name}'")

    def field_names(self) -> list[str]:
        return [f.name for f in self._fields]

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def _register(self, f: Field) -> Field:
        if any(existing.name == f.name for existing in self._fields):
            raise ValueError(f"folder '{self.name}' already has a field '{f.name}'")
        self._fields.append(f)
        return f


class Panel:
    """Root of the debug panel; owns folders in creation order."""

    def __init__(self) -> None:
        self.folders: list[Folder] = []
        self._folder_listeners: list[Callable[[Folder], None]] = []

    def add_folder(self, name: str) -> Folder:
        if any(folder.name == name for folder in self.folders):
            raise ValueError(f"panel already has a folder named '{name}'")
        folder = Folder(name)
        self.folders.append(folder)
        logger.debug("Panel folder '%s' added.", name)
        for listener in self._folder_listeners:
            listener(folder)
        return folder

    def on_folder_added(self, listener: Callable[[Folder], None]) -> None:
        self._folder_listeners.append(listener)

    def folder(self, name: str) -> Folder:
        for folder in self.folders:
            if folder.name == name:
                return folder
        raise KeyError(f"panel has no folder '{name}'")
