"""Argument parsing on top of click.

A click command is generated from ``schema.FLAGS``: every flag becomes a
``click.Option`` (the target also gets a ``click.Argument``) whose callback
runs the flag's validator when click binds the value. Conflicts and
requirements are then checked in one pass over the table, and click's own
usage errors are translated into dirble's error types.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Tuple

import click

from dirble.errors import (
    ConflictingArguments,
    HelpRequested,
    MissingRequiredArgument,
    MissingValue,
    RepeatedArgument,
    UnexpectedArgument,
    UnknownArgument,
    UnsatisfiedRequirement,
    VersionRequested,
)
from dirble.schema import FLAGS, PROG, VERSION, FlagSpec

logger = logging.getLogger(__name__)

SECRET_FLAGS = frozenset({"password"})

BOUND_KEY = "dirble.bound"
ORDER_KEY = "dirble.order"


@dataclass(frozen=True)
class MatchSet:
    """Typed values for every store flag, defaults filled in."""

    values: Dict[str, Any]
    present: FrozenSet[str]

    def is_present(self, name: str) -> bool:
        return name in self.present

    def value_of(self, name: str) -> Any:
        return self.values[name]


def _record(ctx: click.Context, spec: FlagSpec, value: Any) -> None:
    ctx.meta.setdefault(BOUND_KEY, {})[spec.name] = value
    ctx.meta.setdefault(ORDER_KEY, []).append(spec.name)
    logger.debug(
        "Bound %s = %r",
        spec.display,
        "***" if spec.name in SECRET_FLAGS else value,
    )


def _spells_flag(token: str, spellings: Dict[str, FlagSpec]) -> bool:
    if token == "--":
        return True
    if token.startswith("--"):
        return token.partition("=")[0] in spellings
    return len(token) > 1 and token[:2] in spellings


def _convert(spec: FlagSpec, raw: str, spellings: Dict[str, FlagSpec]) -> List[Any]:
    # click hands over whatever token follows the option; a known flag there
    # means the value was left out.
    if _spells_flag(raw, spellings):
        raise MissingValue(spec.display)
    pieces = raw.split(spec.delimiter) if spec.delimiter else [raw]
    if spec.validator:
        return [spec.validator(piece, spec.display) for piece in pieces]
    return pieces


def _value_callback(spec: FlagSpec, spellings: Dict[str, FlagSpec]):
    def callback(ctx, param, value):
        occurrences = list(value or ())
        if not occurrences:
            return None
        if len(occurrences) > 1 and not spec.multiple:
            raise RepeatedArgument(spec.display)
        parts: List[Any] = []
        for raw in occurrences:
            parts.extend(_convert(spec, raw, spellings))
        result = tuple(parts) if spec.multiple else parts[0]
        _record(ctx, spec, result)
        return result

    return callback


def _positional_callback(spec: FlagSpec, spellings: Dict[str, FlagSpec]):
    def callback(ctx, param, value):
        tokens = list(value or ())
        if not tokens:
            return None
        if len(tokens) > 1:
            raise UnexpectedArgument(tokens[1])
        if spec.name in ctx.meta.get(BOUND_KEY, {}):
            raise UnexpectedArgument(tokens[0])
        result = spec.validator(tokens[0], spec.display) if spec.validator else tokens[0]
        _record(ctx, spec, result)
        return result

    return callback


def _switch_callback(spec: FlagSpec):
    def callback(ctx, param, value):
        if not value:
            return False
        if value > 1:
            raise RepeatedArgument(spec.display)
        _record(ctx, spec, True)
        return True

    return callback


def _exit_callback(spec: FlagSpec):
    def callback(ctx, param, value):
        if not value or ctx.resilient_parsing:
            return
        if spec.action == "help":
            raise HelpRequested()
        raise VersionRequested(f"{PROG} {VERSION}")

    return callback


def _declarations(spec: FlagSpec) -> List[str]:
    decls = []
    if spec.short:
        decls.append(f"-{spec.short}")
    if spec.long:
        decls.append(f"--{spec.long}")
    decls.append(spec.name)
    return decls


def build_command(flags: Tuple[FlagSpec, ...] = FLAGS) -> click.Command:
    """Generate the click command for a flag table."""
    spellings = {decl: spec for spec in flags for decl in _declarations(spec)[:-1]}
    params: List[click.Parameter] = []
    for spec in flags:
        if spec.action != "store":
            params.append(click.Option(
                _declarations(spec),
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=_exit_callback(spec),
                help=spec.help,
            ))
            continue
        if spec.positional:
            params.append(click.Argument(
                [f"{spec.name}_positional"],
                nargs=-1,
                metavar=f"<{spec.value_name or spec.name}>",
                callback=_positional_callback(spec, spellings),
            ))
        if not spec.short and not spec.long:
            continue
        if spec.takes_value:
            params.append(click.Option(
                _declarations(spec),
                multiple=True,
                metavar=spec.value_name,
                callback=_value_callback(spec, spellings),
                help=spec.help,
            ))
        else:
            params.append(click.Option(
                _declarations(spec),
                count=True,
                callback=_switch_callback(spec),
                help=spec.help,
            ))
    return click.Command(PROG, params=params, add_help_option=False)


def _split_short_equals(tokens: List[str], value_shorts: FrozenSet[str]) -> List[str]:
    """Rewrite ``-w=list`` as ``-w list`` so an empty inline value stays empty."""
    result: List[str] = []
    for position, token in enumerate(tokens):
        if token == "--":
            return result + tokens[position:]
        if len(token) > 2 and token[0] == "-" and token[1] in value_shorts and token[2] == "=":
            result.extend([token[:2], token[3:]])
        else:
            result.append(token)
    return result


class TokenParser:
    def __init__(self, flags: Tuple[FlagSpec, ...] = FLAGS):
        self.flags = flags
        self.command = build_command(flags)
        self._by_name = {spec.name: spec for spec in flags}
        self._spellings = {decl: spec for spec in flags for decl in _declarations(spec)[:-1]}
        self._value_shorts = frozenset(spec.short for spec in flags if spec.short and spec.takes_value)

    def parse(self, argv: Iterable[str]) -> MatchSet:
        tokens = _split_short_equals(list(argv), self._value_shorts)
        if not tokens:
            required = next(spec for spec in self.flags if spec.required)
            raise MissingRequiredArgument(required.display, show_help=True)

        try:
            ctx = self.command.make_context(PROG, tokens)
        except click.NoSuchOption as e:
            raise UnknownArgument(e.option_name) from e
        except click.BadOptionUsage as e:
            spec = self._spellings.get(e.option_name)
            if spec is not None and spec.takes_value:
                raise MissingValue(spec.display) from e
            raise UnexpectedArgument(e.option_name) from e
        except click.UsageError as e:
            raise UnexpectedArgument(e.format_message()) from e

        bound: Dict[str, Any] = ctx.meta.get(BOUND_KEY, {})
        order: List[str] = ctx.meta.get(ORDER_KEY, [])
        self._check_conflicts(order)
        self._check_required(order)
        self._check_requires(order)
        return self._matches(bound, order)

    def _check_conflicts(self, order: List[str]) -> None:
        for position, name in enumerate(order):
            spec = self._by_name[name]
            for other in order[position + 1:]:
                if other in spec.conflicts_with or name in self._by_name[other].conflicts_with:
                    raise ConflictingArguments(spec.display, self._by_name[other].display)

    def _check_required(self, order: List[str]) -> None:
        for spec in self.flags:
            if spec.required and spec.name not in order:
                raise MissingRequiredArgument(spec.display)

    def _check_requires(self, order: List[str]) -> None:
        for name in order:
            spec = self._by_name[name]
            for required in sorted(spec.requires):
                if required not in order:
                    raise UnsatisfiedRequirement(spec.display, self._by_name[required].display)

    def _matches(self, bound: Dict[str, Any], order: List[str]) -> MatchSet:
        values: Dict[str, Any] = {}
        for spec in self.flags:
            if spec.action != "store":
                continue
            if spec.name in bound:
                values[spec.name] = bound[spec.name]
            elif spec.takes_value:
                values[spec.name] = spec.default
            else:
                values[spec.name] = False
        return MatchSet(values=values, present=frozenset(order))


def parse_args(argv: Iterable[str], flags: Tuple[FlagSpec, ...] = FLAGS) -> MatchSet:
    return TokenParser(flags).parse(argv)
