"""
Convention rules mapping source paths to test paths.

Each rule is an independent pattern/producer pair. A path may satisfy any
number of rules; the mapper applies all of them in table order and keeps
every candidate they produce.

Patterns must match the whole repository-relative path. The optional
``component`` group captures a ``components/<name>/`` prefix that is
carried verbatim into the produced paths.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Tuple

from ..constants import DEFAULT_BACKEND_EXTENSION, DEFAULT_FRONTEND_EXTENSION
from .inflection import Pluralizer, default_pluralizer

Producer = Callable[["re.Match[str]"], List[str]]

COMPONENT_PREFIX = r"(?P<component>components/.+/)?"


@dataclass(frozen=True)
class ConventionRule:
    """A named pattern and the function producing candidates from its match."""

    name: str
    pattern: Pattern[str]
    produce: Producer

    def apply(self, path: str) -> List[str]:
        """Return the candidates for ``path``, or an empty list when it does not match."""
        match = self.pattern.fullmatch(path)
        if match is None:
            return []
        return self.produce(match)


def component_of(match: "re.Match[str]") -> str:
    """Component prefix of a match, ``""`` when the path has none."""
    try:
        return match.group("component") or ""
    except IndexError:
        return ""


def build_default_rules(
    backend_extension: str = DEFAULT_BACKEND_EXTENSION,
    frontend_extension: str = DEFAULT_FRONTEND_EXTENSION,
    pluralizer: Optional[Pluralizer] = None,
) -> Tuple[ConventionRule, ...]:
    """Build the ordered convention table for the given file extensions."""
    inflector = pluralizer or default_pluralizer
    ext = backend_extension
    web_ext = frontend_extension
    be = re.escape(backend_extension)
    fe = re.escape(frontend_extension)

    def compile_rule(pattern: str) -> Pattern[str]:
        return re.compile(pattern, re.ASCII)

    # When test files change, they are their own test
    def direct_test(match):
        return [match.string]

    # Unit tests for changes in lib/ and eagerlib/
    def library(match):
        c, rest = component_of(match), match.group("rest")
        return [
            f"{c}test/unit/{rest}_test.{ext}",
            f"{c}test/unit/lib/{rest}_test.{ext}",
        ]

    # Functional tests for controllers
    def controller(match):
        c, name = component_of(match), match.group("name")
        return [f"{c}test/controllers/{name}_controller_test.{ext}"]

    # Controller test named after the singular model
    def model_controller(match):
        c, model = component_of(match), match.group("model")
        return [f"{c}test/controllers/{model}_controller_test.{ext}"]

    # Unit tests for the model and functional tests for related controllers
    def model(match):
        c, model = component_of(match), match.group("model")
        models = inflector.plural(model)
        return [
            f"{c}test/models/{model}_test.{ext}",
            f"{c}test/unit/{model}_test.{ext}",
            f"{c}test/controllers/{models}_controller_test.{ext}",
            f"{c}test/controllers/admin/{models}_controller_test.{ext}",
            f"{c}test/controllers/api/{models}_controller_test.{ext}",
        ]

    # Unit tests for anything else under app/
    def app_subtree(match):
        c, subtree, rest = component_of(match), match.group("subtree"), match.group("rest")
        segments = rest.split("/")
        return [
            f"{c}test/unit/{subtree}/{rest}_test.{ext}",
            f"{c}test/unit/{segments[0]}/{segments[-1]}_test.{ext}",
        ]

    def maintenance(match):
        return [f"test/unit/maintenance/{match.group('script')}_test.{ext}"]

    # Web components keep their tests in a tests/ folder beneath the path
    def web_component(match):
        return [f"{match.string}/tests/{match.group('name')}.test.{web_ext}"]

    model_pattern = compile_rule(COMPONENT_PREFIX + rf"app/models/(?P<model>.*)\.{be}")

    return (
        ConventionRule(
            "direct_test",
            compile_rule(r"(?:components/.+/)?test/.*_test\." + be),
            direct_test,
        ),
        ConventionRule(
            "library",
            compile_rule(COMPONENT_PREFIX + rf"(?:eager)?lib/(?P<rest>.*)\.{be}"),
            library,
        ),
        ConventionRule(
            "controller",
            compile_rule(COMPONENT_PREFIX + rf"app/controllers/(?P<name>.*)_controller\.{be}"),
            controller,
        ),
        ConventionRule("model_controller", model_pattern, model_controller),
        ConventionRule("model", model_pattern, model),
        ConventionRule(
            "app_subtree",
            compile_rule(COMPONENT_PREFIX + rf"app/(?P<subtree>\w+)/(?P<rest>.*)\.{be}"),
            app_subtree,
        ),
        ConventionRule(
            "maintenance",
            compile_rule(rf"db/maintenance/maintenance/(?P<script>.*)\.{be}"),
            maintenance,
        ),
        ConventionRule(
            "web_component",
            compile_rule(rf".*components/.*/(?P<name>.*)\.{fe}"),
            web_component,
        ),
    )


DEFAULT_RULES = build_default_rules()
