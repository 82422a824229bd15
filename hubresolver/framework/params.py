"""
Request Parameter Types

Parameters arrive as an ordered list of name/value pairs. A value is either a
plain string or a typed value; resolvers only consult its string form.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class ParamType(str, Enum):
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class ParamValue:
    """A typed parameter value"""

    type: ParamType = ParamType.STRING
    string_val: str = ""
    array_val: List[str] = field(default_factory=list)
    object_val: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def of(cls, value: Union[str, "ParamValue"]) -> "ParamValue":
        if isinstance(value, ParamValue):
            return value
        return cls(type=ParamType.STRING, string_val=value)


@dataclass(frozen=True)
class Param:
    name: str
    value: Union[str, ParamValue]

    @property
    def string_value(self) -> str:
        """The string form of this parameter's value"""
        return ParamValue.of(self.value).string_val

    @classmethod
    def parse(cls, text: str) -> "Param":
        """Build a string parameter from "name=value" text"""
        name, sep, value = text.partition("=")
        if not sep or not name:
            raise ValueError(f"expected name=value, got {text!r}")
        return cls(name=name.strip(), value=value)


def params_to_map(params: Optional[List[Param]]) -> Dict[str, str]:
    """Collapse parameters into a name -> string mapping, last write wins"""
    collapsed = {}
    for param in params or []:
        collapsed[param.name] = param.string_value
    return collapsed
