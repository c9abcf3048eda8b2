import json
import logging
import sys
from datetime import datetime, timedelta
from enum import Enum
from functools import lru_cache
from typing import TypeVar, Any, Type, Optional, Union, get_args, Literal, get_origin, Callable, Iterable, Dict

from dateutil.parser import isoparse

if sys.version_info >= (3, 10):
    from types import UnionType, NoneType
else:
    UnionType = Union
    NoneType = type(None)

import attrs
import cattrs
from cattrs import override
from cattrs.gen import make_dict_unstructure_fn, make_dict_structure_fn

from fix_azure_arm.types import Json, JsonElement

log = logging.getLogger("fix.azure.arm")

AnyT = TypeVar("AnyT")

# the global converter instance
__converter = cattrs.Converter()


def json_name(attribute: "attrs.Attribute[Any]") -> str:
    """
    The name of an attribute on the wire.
    Either the alias defined in the field metadata or the camelCase version of the attribute name.
    """
    if alias := attribute.metadata.get("alias"):
        return str(alias)
    head, *tail = attribute.name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)


@lru_cache(maxsize=None)
def _unstructure_fn(cls: Type[Any]) -> Callable[[Any], Json]:
    # ignore all private attributes, rename all others to their wire name
    return make_dict_unstructure_fn(
        cls,
        __converter,
        _cattrs_omit_if_default=False,
        _cattrs_use_linecache=True,
        _cattrs_use_alias=False,
        _cattrs_include_init_false=False,
        **{
            a.name: override(omit=True) if a.name.startswith("_") else override(rename=json_name(a))
            for a in attrs.fields(cls)
        },
    )


@lru_cache(maxsize=None)
def _structure_fn(cls: Type[Any]) -> Callable[[Any, Type[Any]], Any]:
    return make_dict_structure_fn(
        cls,
        __converter,
        _cattrs_use_linecache=True,
        **{a.name: override(rename=json_name(a)) for a in attrs.fields(cls) if not a.name.startswith("_")},
    )


__converter.register_unstructure_hook_factory(attrs.has, _unstructure_fn)
__converter.register_structure_hook_factory(attrs.has, _structure_fn)


# work around until this is solved: https://github.com/python-attrs/cattrs/issues/278
def is_primitive_or_primitive_union(t: Any) -> bool:
    if t in (str, bytes, int, float, bool, NoneType):
        return True
    origin = get_origin(t)
    if origin is Literal:
        return True
    if (base := cattrs._compat.get_newtype_base(t)) is not None:
        return is_primitive_or_primitive_union(base)
    if origin in (UnionType, Union):
        return all(is_primitive_or_primitive_union(ty) for ty in get_args(t))
    return False


__converter.register_structure_hook_func(is_primitive_or_primitive_union, lambda v, ty: v)


def register_json(
    cls: Type[AnyT],
    to_json_fn: Optional[Callable[[AnyT], JsonElement]] = None,
    from_json_fn: Optional[Callable[[Any], AnyT]] = None,
) -> None:
    """
    Register a json marshaller/unmarshaller for the given class.
    :param cls: the class to register
    :param to_json_fn: the function to convert the class to json
    :param from_json_fn: the function to convert json to the class
    """
    log.debug("Register json structure hooks for class %s", cls.__name__)
    if from_json_fn is not None:
        __converter.register_structure_hook(cls, lambda obj, _: from_json_fn(obj))
    if to_json_fn is not None:
        __converter.register_unstructure_hook(cls, to_json_fn)


def register_tagged_union(base: Type[Any], tag: str, variants: Dict[str, Type[Any]]) -> None:
    """
    Register a polymorphic class hierarchy, where the concrete class is selected by a discriminator property.
    Reading json into the base class selects the variant by the value of the discriminator.
    Reading json into a variant class, uses this class directly.
    Writing json always uses the runtime class of the object.
    :param base: the common base class of all variants.
    :param tag: the name of the discriminator property in json.
    :param variants: the discriminator value to class mapping.
    """

    def structure(js: Any, clazz: Type[Any]) -> Any:
        if clazz is not base:
            return _structure_fn(clazz)(js, clazz)
        if not isinstance(js, dict):
            raise ValueError(f"Expected a json object for {base.__name__}, got: {js}")
        discriminator = js.get(tag)
        variant = variants.get(discriminator) if isinstance(discriminator, str) else None
        if variant is None:
            raise ValueError(f"Unknown {tag} for {base.__name__}: {discriminator}")
        return _structure_fn(variant)(js, variant)

    __converter.register_structure_hook(base, structure)
    __converter.register_unstructure_hook(base, lambda obj: _unstructure_fn(type(obj))(obj))


def utc_str(dt: datetime) -> str:
    if dt.tzinfo is not None and dt.utcoffset() == timedelta(0):
        return dt.replace(tzinfo=None).isoformat() + "Z"
    return dt.isoformat()


def register_enum(base: Type[Enum]) -> None:
    """
    Enums are written as their wire value and read by calling the concrete enum class with the json value.
    """
    __converter.register_unstructure_hook(base, lambda e: e.value)
    __converter.register_structure_hook(base, lambda js, clazz: clazz(js))


# Register some default types not covered in cattrs
register_json(datetime, utc_str, isoparse)


def to_json_str(node: Any, strip_attr: Union[None, str, Iterable[str]] = None, strip_nulls: bool = True) -> str:
    try:
        return json.dumps(to_json(node, strip_attr, strip_nulls))
    except Exception as e:
        log.debug(f"Can not serialize object {node} to json. Error: {e}")
        raise


def to_json(
    node: Any,
    strip_attr: Union[None, str, Iterable[str]] = None,
    strip_nulls: bool = True,
) -> Any:
    """
    Turn the given node into its json representation.
    Properties are emitted with their wire name.
    Absent values are not emitted, unless strip_nulls is set to False.
    """

    def walk_js_object(js: Json, filter_fn: Optional[Callable[[str, Any], bool]] = None) -> Json:
        result: Json = {}
        for k, v in js.items():
            if filter_fn and not filter_fn(k, v):
                continue
            if isinstance(v, dict):
                v = walk_js_object(v, filter_fn)
            elif isinstance(v, (list, tuple)):
                v = [walk_js_object(e, filter_fn) if isinstance(e, dict) else e for e in v]
            result[k] = v
        return result

    def walk(js: Any, filter_fn: Callable[[str, Any], bool]) -> Any:
        if isinstance(js, dict):
            return walk_js_object(js, filter_fn)
        elif isinstance(js, list):
            return [walk_js_object(e, filter_fn) if isinstance(e, dict) else e for e in js]
        return js

    unstructured = __converter.unstructure(node)
    if strip_attr:
        remove_keys = {strip_attr} if isinstance(strip_attr, str) else set(strip_attr)
        unstructured = walk(unstructured, lambda k, v: k not in remove_keys)

    if strip_nulls:
        unstructured = walk(unstructured, lambda k, v: v is not None)

    return unstructured


def from_json(js: JsonElement, clazz: Type[AnyT]) -> AnyT:
    """
    Loads a json object into a python object.
    :param js: the json object to load.
    :param clazz: the type of the python object.
    :return: the loaded python object.
    """
    try:
        return __converter.structure(js, clazz)
    except Exception as e:
        log.debug(f"Can not deserialize json into class {getattr(clazz, '__name__', clazz)}: {js}. Error: {e}")
        raise


def from_json_str(js: Union[str, bytes], clazz: Type[AnyT]) -> AnyT:
    return from_json(json.loads(js), clazz)
