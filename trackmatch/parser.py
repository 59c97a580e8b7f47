"""Grammar for turning title tokens into semantic fragments.

The grammar is small and ad hoc, built around the conventions shared by
catalog tracklists, store search results and video titles:

    [SIDE (.|:)] ARTIST [(&|,|feat) ARTIST ...] - NAME [(REMIXER [& ...] Mix)] [[CATNO]]

Each loop iteration consumes a run of literals and lets the token that
stopped the run decide what the run was.  The parser keeps the whole
token list because deciding whether "A & B" are artists or remixers needs
to look both backward and forward from the conjunction.
"""

from dataclasses import dataclass

from trackmatch.lexer import Token, TokenType, is_track_side


_EOF = Token(TokenType.EOF)


# ── Fragments ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Fragment:
    text: str


class ArtistName(Fragment):
    pass


class Label(Fragment):
    pass


class Remix(Fragment):
    pass


class TrackName(Fragment):
    pass


class TrackSide(Fragment):
    pass


# ── Parser ───────────────────────────────────────────────────────────

class Parser:
    """Single-use parser over a materialized token list."""

    def __init__(self, tokens):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type is not TokenType.EOF:
            self.tokens.append(_EOF)
        self.current = 0
        self.fragments = []

    def parse(self):
        while not self._is_at_end():
            part = self._consume_literals()
            kind = self._peek().type

            if kind in (TokenType.DOT, TokenType.COLUMN):
                if is_track_side(part):
                    self._emit(TrackSide(part))
            elif kind is TokenType.MINUS:
                self._on_minus(part)
            elif kind in (TokenType.AND, TokenType.FEAT):
                self._on_conjunction(part)
                continue
            elif kind is TokenType.LEFT_PAREN:
                self._on_left_paren(part)
            elif kind is TokenType.MIX:
                self._emit(Remix(part))
            elif kind is TokenType.LEFT_BRACKET:
                self._on_left_bracket(part)
            elif kind is TokenType.RIGHT_PAREN:
                pass
            elif kind is TokenType.RIGHT_BRACKET:
                self._emit(Label(part))
            else:
                self._emit(TrackName(part))
            self._advance()
        return self.fragments

    # ── Dispatch handlers ────────────────────────────────────────────

    def _on_minus(self, part):
        previous = self._peek_before()
        if previous is not None and previous.type is TokenType.MIX:
            # "... Extended Mix - Name"
            self._advance()
            self._emit(TrackName(self._consume_literals()))
        elif part:
            self._emit(ArtistName(part))

    def _on_conjunction(self, part):
        """Handle "A & B", "A, B" and "A feat B".

        Both sides are classified by where the conjunction sits: inside a
        "(... Remix)" group they are remixers, otherwise artists.  After a
        second artist the cursor stays on the next conjunction, so in
        "A, B & C" that conjunction sees an empty left side and emits an
        empty artist.
        """
        self._emit(self._classify(part))
        self._advance()
        second = self._consume_literals()
        if self._is_remixer():
            self._emit(Remix(second))
            self._advance()
        else:
            self._emit(ArtistName(second))

    def _on_left_paren(self, part):
        if part or not self.fragments:
            self._emit(TrackName(part))
            return
        # Name that starts with a parenthesis: "Rainfield - (Un)Respire"
        self._advance()
        name = "(" + self._consume_literals()
        if self._peek().type is TokenType.RIGHT_PAREN:
            name += ")"
            self._advance()
            name += self._consume_literals()
        self._emit(TrackName(name))

    def _on_left_bracket(self, part):
        if not self.fragments:
            return
        # After a remixer the name is already known.
        if isinstance(self.fragments[-1], ArtistName):
            self._emit(TrackName(part))

    # ── Context ──────────────────────────────────────────────────────

    def _classify(self, text):
        if self._is_remixer():
            return Remix(text)
        return ArtistName(text)

    def _is_remixer(self):
        """True when the cursor sits inside a "( ... Mix)" group.

        Looking back, an opening parenthesis must come before any dash;
        looking forward, a mix keyword must come before the closing one.
        """
        in_parens = False
        for token in reversed(self.tokens[:self.current + 1]):
            if token.type is TokenType.LEFT_PAREN:
                in_parens = True
                break
            if token.type is TokenType.MINUS:
                return False
        if not in_parens:
            return False

        for token in self.tokens[self.current:]:
            if token.type is TokenType.MIX:
                return True
            if token.type is TokenType.RIGHT_PAREN:
                return False
        return False

    # ── Cursor ───────────────────────────────────────────────────────

    def _consume_literals(self):
        words = []
        while self._peek().type is TokenType.LITERAL:
            words.append(self._peek().lexeme)
            self._advance()
        return " ".join(words)

    def _emit(self, fragment):
        self.fragments.append(fragment)

    def _peek(self):
        return self.tokens[self.current]

    def _peek_before(self):
        if self.current == 0:
            return None
        return self.tokens[self.current - 1]

    def _advance(self):
        if not self._is_at_end():
            self.current += 1

    def _is_at_end(self):
        return self._peek().type is TokenType.EOF


def parse_fragments(tokens):
    """Parse a token list (as produced by ``lex``) into Fragments."""
    return Parser(tokens).parse()
