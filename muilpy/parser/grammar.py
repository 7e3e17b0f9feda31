"""Muil grammar routines that build AST nodes.

    program    := component* EOF
    component  := 'component'? IDENT (':' type)? '{' property* '}'
    property   := IDENT ':' type '?'? (',' | DELIMITER)*
    type       := array_type | union_type
    array_type := '[' union_type ']'
    union_type := IDENT ('|' IDENT)*

Every routine returns `None` when its construct is malformed. The cursor is
not rewound; the caller decides how to continue.
"""

from dataclasses import replace

from muilpy.ast import AstComponent, AstProgram, AstProperty, AstType, AstTypeRef
from muilpy.diagnostics import Diagnostic
from muilpy.diagnostics.codes import PARSER_RECOVERED, PARSER_STOPPED
from muilpy.lexer import TokenKind, token_kind_name
from muilpy.parser.parser import Parser, ParserProgress


def parse_program(parser: Parser) -> AstProgram:
    statements: list[AstComponent] = []
    progress = ParserProgress()

    while not parser.is_exhausted:
        parser.skip_delimiters()
        if parser.at(TokenKind.EOF):
            break

        progress.assert_progressing(parser)
        component = parse_component(parser)
        if component is not None:
            statements.append(component)
            continue

        if not parser.options.recover_on_error:
            parser.error(_stopped(parser))
            break

        # Coarse recovery: drop exactly one token and retry.
        parser.error(_recovered(parser))
        parser.bump()

    return AstProgram(statements=tuple(statements))


def parse_component(parser: Parser) -> AstComponent | None:
    parser.skip_delimiters()
    if parser.options.allow_component_keyword and parser.eat(TokenKind.COMPONENT) is not None:
        parser.skip_delimiters()

    name = parser.expect(TokenKind.IDENTIFIER)
    if name is None:
        return None

    extends: AstType | None = None
    if parser.match(TokenKind.COLON) is not None:
        extends = parse_type(parser)
        if extends is None:
            return None

    if parser.expect(TokenKind.LBRACE, skip_delimiters=True) is None:
        return None

    properties: list[AstProperty] = []
    while parser.match(TokenKind.RBRACE) is None and not parser.is_exhausted:
        parser.skip_delimiters()
        prop = parse_property(parser)
        if prop is None:
            break
        properties.append(prop)
        parser.match(TokenKind.COMMA)

    return AstComponent(name=parser.text(name), properties=tuple(properties), extends=extends)


def parse_property(parser: Parser) -> AstProperty | None:
    name = parser.expect(TokenKind.IDENTIFIER)
    if name is None:
        return None

    if parser.expect(TokenKind.COLON, skip_delimiters=True) is None:
        return None

    type_ = parse_type(parser)
    if type_ is None:
        return None

    is_optional = parser.match(TokenKind.QUESTION) is not None
    return AstProperty(name=parser.text(name), type=type_, is_optional=is_optional)


def parse_type(parser: Parser) -> AstType | None:
    if parser.at(TokenKind.LBRACKET):
        return parse_array_type(parser)
    return parse_simple_or_composite_type(parser)


def parse_array_type(parser: Parser) -> AstType | None:
    if parser.expect(TokenKind.LBRACKET, skip_delimiters=True) is None:
        return None

    element = parse_simple_or_composite_type(parser)
    if element is None:
        return None

    if parser.expect(TokenKind.RBRACKET, skip_delimiters=True) is None:
        return None

    # The array flag covers the whole union, never a single alternative.
    return AstType(alternatives=tuple(replace(alternative, is_array=True) for alternative in element))


def parse_simple_or_composite_type(parser: Parser) -> AstType | None:
    names: list[str] = []
    while True:
        token = parser.expect(TokenKind.IDENTIFIER)
        if token is None:
            return None
        names.append(parser.text(token))
        if parser.match(TokenKind.PIPE) is None:
            break

    last = len(names) - 1
    return AstType(
        alternatives=tuple(AstTypeRef(name=name, is_composite=index < last) for index, name in enumerate(names))
    )


def _recovered(parser: Parser) -> Diagnostic:
    token = parser.peek()
    return Diagnostic(
        code=PARSER_RECOVERED.code,
        message=f"Skipped {token_kind_name(token.kind)} while recovering",
        range=token.range,
        severity=PARSER_RECOVERED.severity,
        hint=PARSER_RECOVERED.hint,
        category=PARSER_RECOVERED.category,
        line=token.line,
        column=token.column,
    )


def _stopped(parser: Parser) -> Diagnostic:
    token = parser.peek()
    return Diagnostic(
        code=PARSER_STOPPED.code,
        message=f"{PARSER_STOPPED.message} ({token_kind_name(token.kind)})",
        range=token.range,
        severity=PARSER_STOPPED.severity,
        hint=PARSER_STOPPED.hint,
        category=PARSER_STOPPED.category,
        line=token.line,
        column=token.column,
    )
