from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    final,
    get_args,
    get_origin,
)

from attrs import field, mutable

from .exceptions import InvalidInputError
from .utils import clean_type_str


class TokenConverterError(InvalidInputError):
    ...


@mutable
class TokenConverterBase(ABC):
    num_req_tokens: int = field(init=False)

    @property
    @abstractmethod
    def target_type(self) -> Type:
        ...

    @abstractmethod
    def _convert(self, tokens: Sequence[str]) -> Any:
        ...

    @final
    def convert(self, tokens: Sequence[str]) -> Any:
        try:
            return self._convert(tokens)
        except TokenConverterError:
            raise
        except ValueError as e:
            raise TokenConverterError(
                f"'{' '.join(tokens)}' is not a valid "
                f"{clean_type_str(self.target_type)}"
            ) from e


@mutable
class BasicTokenConverter(TokenConverterBase):
    supported_type: Type
    conv_func: Callable
    target_type: Type

    def __attrs_post_init__(self) -> None:
        self.num_req_tokens = 1
        if self.target_type != self.supported_type:
            raise TypeError(
                f"{str(self.target_type)} not same as "
                f"supported type {str(self.supported_type)}"
            )

    def _convert(self, tokens: Sequence[str]) -> Any:
        return self.conv_func(*tokens)

    @classmethod
    def factory(
        cls,
        target_type: Type,
        store: "TokenConverterStore",
        supported_type: Type,
        conv_func: Optional[Callable] = None,
    ):
        del store
        if conv_func is None:
            conv_func = supported_type
        return cls(
            supported_type=supported_type, target_type=target_type, conv_func=conv_func
        )


@mutable
class EnumTokenConverter(TokenConverterBase):
    """Converts a token to the enum member whose value reads the same."""

    target_type: Type
    _tokens_mapper: Dict[str, Any] = field(factory=dict, init=False)

    def __attrs_post_init__(self) -> None:
        self.num_req_tokens = 1
        if not (
            isinstance(self.target_type, type) and issubclass(self.target_type, Enum)
        ):
            raise TypeError(f"{str(self.target_type)} is not an Enum")
        self._tokens_mapper = {str(e.value): e for e in self.target_type}

    def _convert(self, tokens: Sequence[str]) -> Any:
        if tokens[0] in self._tokens_mapper:
            return self._tokens_mapper[tokens[0]]
        else:
            raise ValueError(f"{tokens[0]} not part of {str(self.target_type)}")

    @classmethod
    def factory(cls, target_type: Type, store: "TokenConverterStore"):
        del store
        return cls(target_type=target_type)


@mutable
class TupleTokenConverter(TokenConverterBase):
    target_type: Type
    tuple_converters: List[TokenConverterBase] = field(factory=list)

    @classmethod
    def factory(cls, target_type: Type, store: "TokenConverterStore"):
        if not get_origin(target_type) == get_origin(Tuple[int]):
            raise TypeError(f"{str(target_type)} is not of type 'Tuple'")

        type_args = get_args(target_type)
        if len(type_args) == 0 or Ellipsis in type_args:
            raise TypeError(f"{str(target_type)} has no fixed length")
        tuple_converters = []
        for type_arg in type_args:
            tuple_converters.append(store.get_converter(type_arg))
        return cls(target_type=target_type, tuple_converters=tuple_converters)

    def __attrs_post_init__(self) -> None:
        self.num_req_tokens = 0
        for converter in self.tuple_converters:
            self.num_req_tokens += converter.num_req_tokens

    def _convert(self, tokens: Sequence[str]) -> Any:
        tuple_out = []
        pos = 0
        for converter in self.tuple_converters:
            tuple_tokens = tokens[pos : (pos + converter.num_req_tokens)]
            pos = pos + converter.num_req_tokens
            tuple_out.append(converter.convert(tuple_tokens))
        return tuple(tuple_out)


class TokenConverterStore:
    _converter_factories: List[
        Tuple[Callable[[Type, "TokenConverterStore"], TokenConverterBase], float]
    ]

    def __init__(self, add_defaults: bool = True):
        self._converter_factories = []
        if add_defaults:
            self.add_default_converters()

    def add_converter_factory(
        self,
        converter_factory: Callable[[Type, "TokenConverterStore"], TokenConverterBase],
        priority: float,
    ):
        self._converter_factories.append((converter_factory, priority))
        self._converter_factories.sort(key=lambda x: x[1], reverse=True)

    def add_default_converters(self):
        self.add_converter_factory(
            partial(BasicTokenConverter.factory, supported_type=int), 5
        )
        self.add_converter_factory(EnumTokenConverter.factory, 6)
        self.add_converter_factory(TupleTokenConverter.factory, 10)

    def get_converter(self, target_type: Type) -> TokenConverterBase:
        for converter_factory, _ in self._converter_factories:
            try:
                return converter_factory(target_type, self)
            except TypeError:
                pass

        raise TypeError(f"No available converter for {str(target_type)}")
