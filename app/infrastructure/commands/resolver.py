"""Command lookup and overload resolution."""

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.commands.arguments.base import ConversionError
from infrastructure.commands.arguments.wrappers import OptionalArg, find_wrapper
from infrastructure.commands.consumer import ConsumptionResult, TokenConsumer
from infrastructure.commands.exceptions import (
    CommandNotFoundError,
    NoMatchingOverloadError,
)
from infrastructure.commands.models import Command, Execution
from infrastructure.commands.registry import CommandRegistry

if TYPE_CHECKING:
    from infrastructure.commands.context import CommandContext

logger = get_module_logger()


@dataclass(frozen=True)
class Resolution:
    """Selected execution and its converted values, in slot order."""

    command: Command
    execution: Execution
    values: Tuple[Any, ...]


@dataclass
class _Attempt:
    result: ConsumptionResult
    error: ConversionError

    @property
    def progress(self) -> Tuple[int, int, int]:
        # A slot error outranks leftover input at the same position.
        leftover = self.result.is_success
        return (self.result.consumed, self.result.converted, 0 if leftover else 1)


class CommandResolver:
    """Resolve an invocation to a command execution.

    Executions are tried in declared order. The first one whose slots all
    convert and that consumes every input token is selected. When none does,
    the error of the attempt that progressed furthest (most tokens consumed,
    then most slots converted) is reported; ties go to the earlier execution.

    Example:
        resolver = CommandResolver(registry)
        resolution = await resolver.resolve("remind", ["10m", "stretch"], ctx)
        await resolver.invoke(resolution, ctx)
    """

    def __init__(self, registry: CommandRegistry, consumer: Optional[TokenConsumer] = None):
        self.registry = registry
        self.consumer = consumer or TokenConsumer()

    def find_command(self, name: str) -> Command:
        """Look up a command by name or alias, ignoring case.

        Raises:
            CommandNotFoundError: If nothing matches
        """
        command = self.registry.get_command(name)
        if command is None:
            logger.info("command_not_found", name=name)
            raise CommandNotFoundError(name)
        return command

    async def resolve(
        self,
        name: str,
        tokens: Sequence[str],
        context: "CommandContext",
    ) -> Resolution:
        """Resolve a text invocation.

        Args:
            name: Command name token as typed
            tokens: Tokens after the command name
            context: Invocation context

        Returns:
            Resolution with the selected execution and typed values

        Raises:
            CommandNotFoundError: If no command matches ``name``
            NoMatchingOverloadError: If no execution accepts the input
        """
        command = self.find_command(name)
        tokens = tuple(tokens)
        best: Optional[_Attempt] = None

        for execution in command.executions:
            result = await self.consumer.consume(execution.arguments, tokens, context)

            if result.is_success and result.consumed == len(tokens):
                logger.debug(
                    "command_resolved",
                    command=command.name,
                    signature=execution.signature,
                )
                return Resolution(command, execution, tuple(result.values))

            error = result.error or ConversionError(
                "Too many arguments: " + " ".join(tokens[result.consumed:])
            )
            logger.debug(
                "execution_rejected",
                command=command.name,
                signature=execution.signature,
                error=error.message,
                details=list(error.details),
            )
            attempt = _Attempt(result, error)
            if best is None or attempt.progress > best.progress:
                best = attempt

        message = best.error.message if best else f"{command.name} has no executions"
        logger.info("no_matching_overload", command=command.name, error=message)
        raise NoMatchingOverloadError(command.name, message)

    async def resolve_options(
        self,
        name: str,
        options: Mapping[str, Any],
        context: "CommandContext",
    ) -> Resolution:
        """Resolve an interaction whose options the platform already typed.

        Option keys are matched against lower-cased slot names. Slots without
        a value fall back to their optional default; required slots without a
        value, or option keys no slot declares, reject the execution.

        Raises:
            CommandNotFoundError: If no command matches ``name``
            NoMatchingOverloadError: If no execution fits the options
        """
        command = self.find_command(name)
        provided = {key.lower(): value for key, value in options.items()}
        error = f"{command.name} has no executions"

        for execution in command.executions:
            slots = [(argument.name.lower(), argument) for argument in execution.arguments]
            unknown = sorted(set(provided) - {key for key, _ in slots})
            if unknown:
                error = f"Unknown option: {unknown[0]}"
                continue

            values = []
            for key, argument in slots:
                if key in provided:
                    values.append(provided[key])
                    continue
                optional = find_wrapper(argument, OptionalArg)
                if optional is None:
                    error = f"Missing argument: {argument.name}"
                    break
                values.append(optional.resolve_default(context))
            else:
                return Resolution(command, execution, tuple(values))

        logger.info("no_matching_overload", command=command.name, error=error)
        raise NoMatchingOverloadError(command.name, error)

    async def invoke(self, resolution: Resolution, context: "CommandContext") -> Any:
        """Run the selected handler once with the typed values."""
        result = resolution.execution.handler(context, *resolution.values)
        if inspect.isawaitable(result):
            result = await result
        return result
