"""Field descriptors for option classes.

An option is declared once, as a class attribute, and that declaration holds
everything about it: its default, the key that toggles it, its label, and
the rsync tokens it produces.

    class RsyncOptions(ConfigBase):
        compress = UIField(
            type_=bool,
            default=False,
            key="z",
            label="Compress",
            explanation="Compress file data during the transfer",
            rsync_flag="-z",
        )

    RsyncOptions.compress.key     # "z"   (class access: the descriptor)
    RsyncOptions().compress       # False (instance access: the value)

`UIField` is a toggle shown in the Options panel; `Field` is a plain value
(such as the exclusion list) that only contributes tokens. Declaration
order matters: it is the toggle index order and the token order.
"""

from typing import Any, Callable

ArgsFn = Callable[[Any], list[str]]


class _OptionDescriptor:
    """Value storage and rsync token generation shared by both field kinds."""

    # Name of the per-class dict this kind registers itself in
    registry: str = ""

    def __init__(self, type_: type, default: Any, rsync_args: ArgsFn | None):
        self.type_ = type_
        self.default = default
        self.rsync_args = rsync_args
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        # Look in the class's own namespace so subclasses get their own dict
        fields = owner.__dict__.get(self.registry)
        if fields is None:
            fields = {}
            setattr(owner, self.registry, fields)
        fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        if self.name not in obj.__dict__:
            return self.initial(obj)
        return obj.__dict__[self.name]

    def __set__(self, obj: Any, value: Any) -> None:
        obj.__dict__[self.name] = value

    def initial(self, obj: Any) -> Any:
        return self.default

    def to_rsync_args(self, value: Any) -> list[str]:
        if self.rsync_args is not None:
            return self.rsync_args(value)
        return []


class UIField(_OptionDescriptor):
    """A toggleable option.

    Emits `rsync_flag` when the value is truthy, or whatever `rsync_args`
    returns for options that need more than one token.
    """

    registry = "_ui_fields"

    def __init__(
        self,
        type_: type,
        default: Any,
        key: str,
        label: str,
        explanation: str,
        *,
        rsync_flag: str | None = None,
        rsync_args: ArgsFn | None = None,
    ):
        super().__init__(type_, default, rsync_args)
        self.key = key
        self.label = label
        self.explanation = explanation
        self.rsync_flag = rsync_flag

    def to_rsync_args(self, value: Any) -> list[str]:
        if self.rsync_args is None and self.rsync_flag and value:
            return [self.rsync_flag]
        return super().to_rsync_args(value)


class Field(_OptionDescriptor):
    """A data-only value. Mutable defaults go through `default_factory`."""

    registry = "_data_fields"

    def __init__(
        self,
        type_: type,
        default: Any = None,
        *,
        default_factory: Callable[[], Any] | None = None,
        rsync_args: ArgsFn | None = None,
    ):
        super().__init__(type_, default, rsync_args)
        self.default_factory = default_factory

    def initial(self, obj: Any) -> Any:
        if self.default_factory is None:
            return self.default
        # Materialize once so in-place edits stick to this instance
        value = self.default_factory()
        obj.__dict__[self.name] = value
        return value


class ConfigBase:
    """Base for classes declared with UIField/Field attributes."""

    _ui_fields: dict[str, UIField]
    _data_fields: dict[str, Field]

    def __init__(self, **values: Any) -> None:
        known = self.get_all_fields()
        for name, value in values.items():
            if name in known:
                setattr(self, name, value)

    @classmethod
    def get_ui_fields(cls) -> dict[str, UIField]:
        """Toggle fields in declaration order."""
        return getattr(cls, "_ui_fields", {})

    @classmethod
    def get_data_fields(cls) -> dict[str, Field]:
        return getattr(cls, "_data_fields", {})

    @classmethod
    def get_all_fields(cls) -> dict[str, UIField | Field]:
        return {**cls.get_ui_fields(), **cls.get_data_fields()}

    def to_rsync_args(self) -> list[str]:
        """Tokens from every field: toggles first, then data fields."""
        tokens = []
        for name, option in self.get_all_fields().items():
            tokens.extend(option.to_rsync_args(getattr(self, name)))
        return tokens
