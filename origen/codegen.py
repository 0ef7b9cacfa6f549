"""Single-component code generator (get_code).

Markup follows the same attribute serialisation as the composer. The import
line lists only the library exports the generated markup references.
"""

import logging
import re
from typing import Any, Optional, Union

from origen.catalog import ComponentRegistry, get_component_registry
from origen.compose.slots import render_props
from origen.config import config
from origen.exceptions import UnknownComponentError
from origen.types import CodeResult, ComponentName, Framework
from origen.utils import coerce_option

logger = logging.getLogger(__name__)

USE_CLIENT = '"use client";'

_DEFAULT_SELECT_OPTIONS = """options={[
    { value: "option1", label: "Option 1" },
    { value: "option2", label: "Option 2" },
  ]}"""


def render_markup(component: ComponentName, props: dict[str, Any], children: Optional[str]) -> str:
    """Markup for one library component with its canonical sub-structure."""
    attrs = render_props(props)

    if component is ComponentName.CARD and children:
        return "\n".join([
            f"<Card{attrs}>",
            "  <CardHeader>",
            f"    <CardTitle>{children}</CardTitle>",
            "  </CardHeader>",
            "  <CardContent>",
            "    {/* Content here */}",
            "  </CardContent>",
            "</Card>",
        ])

    if component is ComponentName.MODAL and children:
        return "\n".join([
            f"<Modal{attrs}>",
            "  <Modal.Trigger>",
            "    <Button>Open</Button>",
            "  </Modal.Trigger>",
            f'  <Modal.Content title="{children}">',
            "    {/* Content here */}",
            "  </Modal.Content>",
            "</Modal>",
        ])

    if component is ComponentName.SELECT:
        code = f"<Select{attrs}"
        if not props.get("options"):
            code += f"\n  {_DEFAULT_SELECT_OPTIONS}"
        if children:
            code += f'\n  placeholder="{children}"'
        return code + "\n/>"

    name = component.value.capitalize()
    if children:
        return f"<{name}{attrs}>{children}</{name}>"
    return f"<{name}{attrs} />"


class CodeGenerator:
    """Renders a component plus the import line and npm dependencies it needs."""

    def __init__(self, registry: ComponentRegistry = None, package: str = None):
        self._registry = registry
        self.package = package or config.package_import

    @property
    def registry(self) -> ComponentRegistry:
        if self._registry is None:
            self._registry = get_component_registry()
        return self._registry

    def referenced_exports(self, code: str) -> list[str]:
        """Library exports that appear as a tag in ``code``, in catalog order."""
        return [
            name for name in self.registry.all_exports()
            if re.search(rf"<{re.escape(name)}\b", code)
        ]

    def import_lines(self, code: str) -> list[str]:
        names = self.referenced_exports(code)
        if not names:
            return []
        return [f'import {{ {", ".join(names)} }} from "{self.package}";']

    def generate(
        self,
        component: Union[ComponentName, str],
        props: Optional[dict[str, Any]] = None,
        children: Optional[str] = None,
        framework: Union[Framework, str] = Framework.REACT,
        variant: Optional[str] = None,
    ) -> CodeResult:
        """Generate usage code for one of the five library components.

        Raises:
            UnknownComponentError: ``component`` is not in the library.
            InvalidOptionError: unknown framework.
        """
        name = _resolve_component(component)
        framework = coerce_option(Framework, framework, "framework", default=Framework.REACT)

        props = dict(props or {})
        if variant and "variant" not in props:
            props = {"variant": variant, **props}

        code = render_markup(name, props, children)
        spec = self.registry.find(name.value)
        if framework is Framework.NEXTJS and spec is not None and spec.interactive:
            code = f"{USE_CLIENT}\n\n{code}"

        logger.debug(f"generated {name.value} code for {framework.value}")
        return CodeResult(
            component=name,
            code=code,
            imports=self.import_lines(code),
            dependencies=list(spec.dependencies) if spec is not None else [],
        )


def _resolve_component(component: Union[ComponentName, str]) -> ComponentName:
    if isinstance(component, ComponentName):
        return component
    try:
        return ComponentName(str(component).lower())
    except ValueError:
        available = ", ".join(c.value for c in ComponentName)
        raise UnknownComponentError(
            f'Unknown component "{component}". Available components: {available}',
            component=str(component),
        ) from None


_default_generator = CodeGenerator()


def get_code(
    component: Union[ComponentName, str],
    props: Optional[dict[str, Any]] = None,
    children: Optional[str] = None,
    framework: Union[Framework, str] = Framework.REACT,
    variant: Optional[str] = None,
) -> CodeResult:
    return _default_generator.generate(component, props, children, framework, variant)
