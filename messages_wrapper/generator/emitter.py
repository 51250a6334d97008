"""
Dart Emitter - Serialize a DocumentModel into Dart source.

Output is syntactically valid but not canonically indented; the formatter
takes care of layout. Import directives are grouped (dart:, package:,
relative) and sorted within each group, so the result does not depend on
the order in which imports were added.
"""

from typing import List

from .models import (
    DocumentModel,
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ExtensionSpec,
)


def sorted_imports(imports) -> List[List[str]]:
    """
    Group and sort import URIs.

    Args:
        imports: Iterable of import URIs

    Returns:
        Non-empty groups in dart:, package:, relative order
    """
    unique = set(imports)
    dart = sorted(uri for uri in unique if uri.startswith('dart:'))
    package = sorted(uri for uri in unique if uri.startswith('package:'))
    relative = sorted(unique - set(dart) - set(package))
    return [group for group in (dart, package, relative) if group]


class DartEmitter:
    """Renders document models as Dart source text."""

    def emit(self, library: DocumentModel) -> str:
        """
        Render a library.

        Args:
            library: Document model to render

        Returns:
            Dart source text
        """
        sections: List[str] = []

        if library.header_comment:
            sections.append(self._comment(library.header_comment))

        for group in sorted_imports(library.imports):
            sections.append('\n'.join(f"import '{uri}';" for uri in group))

        for spec in library.classes:
            sections.append(self.emit_class(spec))

        for spec in library.top_level_fields:
            sections.append(self.emit_field(spec))

        for spec in library.extensions:
            sections.append(self.emit_extension(spec))

        return '\n\n'.join(sections) + '\n'

    def emit_class(self, spec: ClassSpec) -> str:
        header = f"class {spec.name}"
        if spec.super_type:
            header += f" extends {spec.super_type}"

        members = [self.emit_field(f) for f in spec.fields]
        members += [self.emit_method(m) for m in spec.methods]

        return header + ' {\n' + '\n\n'.join(members) + '\n}'

    def emit_field(self, spec: FieldSpec) -> str:
        text = f"{'static ' if spec.is_static else ''}{spec.type_ref} {spec.name}"
        if spec.initializer is not None:
            text += f" = {spec.initializer}"
        return text + ';'

    def emit_method(self, spec: MethodSpec) -> str:
        lines = []
        if spec.is_override:
            lines.append('@override')

        signature = f"{'static ' if spec.is_static else ''}{spec.return_type} "
        if spec.is_getter:
            signature += f"get {spec.name}"
        else:
            params = ', '.join(f"{p.type_ref} {p.name}" for p in spec.parameters)
            signature += f"{spec.name}({params})"
        if spec.is_async:
            signature += ' async'

        if spec.is_lambda:
            lines.append(f"{signature} => {spec.body};")
        else:
            lines.append(f"{signature} {{\n{spec.body}\n}}")

        return '\n'.join(lines)

    def emit_extension(self, spec: ExtensionSpec) -> str:
        return (
            f"extension {spec.name} on {spec.target_type} {{\n"
            f"{spec.return_type} get {spec.getter_name} => {spec.getter_expr};\n"
            "}"
        )

    def _comment(self, text: str) -> str:
        return '\n'.join(f"// {line}".rstrip() for line in text.splitlines())
