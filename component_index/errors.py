"""User-facing warnings"""

import click

DOCS_URL = "https://github.com/Serverless-Devs/Serverless-Devs/blob/master/docs/zh/command/component.md"


class HumanWarning(Exception):
    """A recoverable problem the user can fix; reported without a traceback."""

    def __init__(self, warning_message: str, tips: str = ""):
        super().__init__(warning_message)
        self.warning_message = warning_message
        self.tips = tips

    def show(self) -> None:
        click.echo(f"\n⚠️  {self.warning_message}", err=True)
        if self.tips:
            click.echo(f"   💡 {self.tips}", err=True)


class ComponentNotFoundError(HumanWarning):
    """The named component is not installed under the active registry."""

    def __init__(self, name: str):
        super().__init__(
            f"the [{name}] component was not found.",
            tips=(
                "Please enter the command 's component' to view all components, "
                f"Serverless Devs' Component document can refer to: {DOCS_URL}"
            ),
        )
        self.name = name


class UnknownRegistryError(HumanWarning):
    """The configured registry is neither of the supported ones."""

    def __init__(self, value: str, supported):
        super().__init__(
            f"the registry [{value}] is not supported.",
            tips="Supported registries: " + ", ".join(supported),
        )
        self.value = value
