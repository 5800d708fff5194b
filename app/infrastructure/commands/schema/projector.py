"""Projection of argument slots onto application command schemas."""

from typing import List, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.commands.arguments.base import ArgumentType
from infrastructure.commands.arguments.entities import (
    AttachmentArg,
    ChannelArg,
    MessageArg,
    RoleArg,
    UserArg,
)
from infrastructure.commands.arguments.primitives import (
    BooleanArg,
    ChoiceArg,
    DoubleArg,
    IntegerArg,
)
from infrastructure.commands.arguments.wrappers import AutocompleteArg, OptionalArg
from infrastructure.commands.models import Command
from infrastructure.commands.schema.models import (
    ApplicationCommandSchema,
    CommandSchema,
    ContextMenuSchema,
    ContextMenuType,
    OptionChoice,
    OptionKind,
    OptionSchema,
)

logger = get_module_logger()

# Effective types whose options never advertise autocomplete
_ENTITY_KINDS = (
    (AttachmentArg, OptionKind.ATTACHMENT),
    (UserArg, OptionKind.USER),
    (RoleArg, OptionKind.ROLE),
    (ChannelArg, OptionKind.CHANNEL),
    (BooleanArg, OptionKind.BOOLEAN),
)


class SchemaProjector:
    """Map commands and their argument slots to platform schemas.

    Option kind follows the slot's effective (innermost) type. An option is
    required unless the slot is wrapped in ``OptionalArg`` anywhere in its
    chain, and advertises autocomplete only when wrapped in
    ``AutocompleteArg``.

    Example:
        projector = SchemaProjector()
        payload = [s.model_dump(by_alias=True, exclude_none=True)
                   for s in projector.project_commands(registry.list_commands())]
    """

    def __init__(self, no_description_placeholder: str = "<No Description>"):
        self.no_description_placeholder = no_description_placeholder

    def _describe(self, text: str) -> str:
        return text if text and text.strip() else self.no_description_placeholder

    def project_option(self, argument: ArgumentType) -> OptionSchema:
        """Build the option descriptor for one slot."""
        name = argument.name.lower()
        description = self._describe(argument.description)
        required = not argument.contains_type(OptionalArg)
        autocomplete = argument.contains_type(AutocompleteArg)
        effective = argument.effective_type

        for kind_type, kind in _ENTITY_KINDS:
            if isinstance(effective, kind_type):
                return OptionSchema(
                    name=name, description=description, kind=kind, required=required
                )

        if isinstance(effective, ChoiceArg):
            return OptionSchema(
                name=name,
                description=description,
                kind=OptionKind.STRING,
                required=required,
                choices=[
                    OptionChoice(name=str(choice), value=str(choice))
                    for choice in effective.choices
                ],
            )

        if isinstance(effective, IntegerArg):
            kind = OptionKind.INTEGER
        elif isinstance(effective, DoubleArg):
            kind = OptionKind.NUMBER
        else:
            kind = OptionKind.STRING

        return OptionSchema(
            name=name,
            description=description,
            kind=kind,
            required=required,
            autocomplete=autocomplete,
        )

    def project_context_menus(self, command: Command) -> List[ContextMenuSchema]:
        """Context-menu descriptors for single user/message-argument executions."""
        menus: List[ContextMenuSchema] = []
        for execution in command.executions:
            if len(execution.arguments) != 1:
                continue
            effective = execution.arguments[0].effective_type
            if isinstance(effective, MessageArg):
                menu_type = ContextMenuType.MESSAGE
            elif isinstance(effective, UserArg):
                menu_type = ContextMenuType.USER
            else:
                continue
            if any(menu.type is menu_type for menu in menus):
                continue
            menus.append(
                ContextMenuSchema(
                    name=command.app_name,
                    type=menu_type,
                    default_permission=command.required_permission,
                )
            )
        return menus

    def project_command(self, command: Command) -> List[CommandSchema]:
        """All schemas for one command: context menus, then the slash command.

        Options come from the first execution; slash commands cannot carry
        overloads, so further executions only contribute context menus.
        """
        if not command.is_application_command:
            return []

        if len(command.executions) > 1:
            logger.warning(
                "application_command_overloads_ignored",
                command=command.name,
                executions=len(command.executions),
            )

        arguments: Sequence[ArgumentType] = (
            command.executions[0].arguments if command.executions else ()
        )
        schemas: List[CommandSchema] = list(self.project_context_menus(command))
        schemas.append(
            ApplicationCommandSchema(
                name=command.name,
                description=self._describe(command.description),
                options=[self.project_option(argument) for argument in arguments],
                default_permission=command.required_permission,
            )
        )
        return schemas

    def project_commands(self, commands: Sequence[Command]) -> List[CommandSchema]:
        """Flatten ``project_command`` over several commands, in order."""
        schemas: List[CommandSchema] = []
        for command in commands:
            schemas.extend(self.project_command(command))
        return schemas


def to_payload(schemas: Sequence[CommandSchema]) -> List[dict]:
    """Serialize schemas to the JSON-ready payload the platform expects."""
    return [
        schema.model_dump(mode="json", by_alias=True, exclude_none=True)
        for schema in schemas
    ]
