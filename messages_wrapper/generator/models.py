"""
Document Model - In-memory description of a generated Dart library.

Plain data records passed from the library builders to the emitter.
Code fragments (initializers, bodies) are kept as Dart source strings.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set


@dataclass(frozen=True)
class Parameter:
    """A required positional parameter."""
    name: str
    type_ref: str


@dataclass
class FieldSpec:
    """A class or top-level field."""
    name: str
    type_ref: str
    initializer: Optional[str] = None
    is_static: bool = False


@dataclass
class MethodSpec:
    """
    A method or getter.

    `is_lambda` methods are emitted as `=> body;` and body must be a single
    expression; otherwise body holds the block statements.
    """
    name: str
    return_type: str
    body: str
    parameters: List[Parameter] = field(default_factory=list)
    is_static: bool = False
    is_override: bool = False
    is_async: bool = False
    is_getter: bool = False
    is_lambda: bool = False


@dataclass
class ClassSpec:
    """A class declaration with ordered members."""
    name: str
    super_type: Optional[str] = None
    fields: List[FieldSpec] = field(default_factory=list)
    methods: List[MethodSpec] = field(default_factory=list)


@dataclass
class ExtensionSpec:
    """An extension exposing a single getter on a target type."""
    name: str
    target_type: str
    getter_name: str
    getter_expr: str
    return_type: str


@dataclass
class DocumentModel:
    """A complete library: header, imports and top-level declarations."""
    header_comment: str = ""
    imports: Set[str] = field(default_factory=set)
    classes: List[ClassSpec] = field(default_factory=list)
    top_level_fields: List[FieldSpec] = field(default_factory=list)
    extensions: List[ExtensionSpec] = field(default_factory=list)

    def add_import(self, uri: str) -> None:
        """Add an import; duplicates are ignored."""
        self.imports.add(uri)

    def find_class(self, name: str) -> Optional[ClassSpec]:
        for spec in self.classes:
            if spec.name == name:
                return spec
        return None
