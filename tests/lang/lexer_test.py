import io
import unittest

from lcinterp.lang.error import Logger
from lcinterp.lang.lexer import Lexer
from lcinterp.lang.tokens import Token, TokenKind as K


def kinds(source):
    return [token.kind for token in Lexer(source, Logger(output_stream=io.StringIO())).lex_tokens()]


class LexerTestCase(unittest.TestCase):

    def test_kinds(self):
        cases = {
            r"\x.x y": [K.LAMBDA, K.IDENTIFIER, K.DOT, K.IDENTIFIER, K.IDENTIFIER, K.NEWLINE, K.EOF],
            "λx.x": [K.LAMBDA, K.IDENTIFIER, K.DOT, K.IDENTIFIER, K.NEWLINE, K.EOF],
            "Lx.x": [K.LAMBDA, K.IDENTIFIER, K.DOT, K.IDENTIFIER, K.NEWLINE, K.EOF],
            "lambda x.x": [K.LAMBDA, K.IDENTIFIER, K.DOT, K.IDENTIFIER, K.NEWLINE, K.EOF],
            "a|b = (c)\n": [K.IDENTIFIER, K.PIPE, K.IDENTIFIER, K.EQUALS, K.LPAREN, K.IDENTIFIER, K.RPAREN,
                            K.NEWLINE, K.EOF],
            "env\nunbind x\nhelp": [K.ENV, K.NEWLINE, K.UNBIND, K.IDENTIFIER, K.NEWLINE, K.HELP, K.NEWLINE, K.EOF],
            "x # comment \\ ( $\ny": [K.IDENTIFIER, K.NEWLINE, K.IDENTIFIER, K.NEWLINE, K.EOF],
            "# only a comment": [K.EOF],
            "": [K.EOF],
            " \t\r": [K.EOF],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, kinds(case), case)

    def test_identifiers(self):
        tokens = Lexer("true 42 x2 envy").lex_tokens()
        self.assertEqual(["true", "42", "x2", "envy"], [token.lexeme for token in tokens[:4]])
        self.assertTrue(all(token.kind is K.IDENTIFIER for token in tokens[:4]))

    def test_positions(self):
        tokens = Lexer("ab = cd\n  yz").lex_tokens()
        self.assertEqual(Token(K.IDENTIFIER, "ab", 1, 1, 2), tokens[0])
        self.assertEqual(Token(K.EQUALS, "=", 1, 4, 1), tokens[1])
        self.assertEqual(Token(K.IDENTIFIER, "cd", 1, 6, 2), tokens[2])
        self.assertEqual(Token(K.NEWLINE, "<newline>", 1, 8, 1), tokens[3])
        self.assertEqual(Token(K.IDENTIFIER, "yz", 2, 3, 2), tokens[4])
        self.assertIs(K.EOF, tokens[-1].kind)

    def test_unexpected_character(self):
        should_fail = ["x $ y", "X", "x = é", "a;b", "{x}"]
        for case in should_fail:
            logger = Logger(output_stream=io.StringIO(), color=False)
            Lexer(case, logger).lex_tokens()
            self.assertTrue(logger.had_error, case)

        stream = io.StringIO()
        logger = Logger(output_stream=stream, color=False)
        logger.set_source("x $ y")
        tokens = Lexer("x $ y", logger).lex_tokens()

        self.assertEqual([K.IDENTIFIER, K.IDENTIFIER, K.NEWLINE, K.EOF], [token.kind for token in tokens])
        self.assertEqual("error at line 1 [3, 4]: Unexpected character '$'\n  x $ y\n    ^\n", stream.getvalue())

    def test_every_error_reported(self):
        stream = io.StringIO()
        Lexer("$ x\n% y", Logger(output_stream=stream, color=False)).lex_tokens()
        self.assertEqual(2, stream.getvalue().count("Unexpected character"))


if __name__ == '__main__':
    unittest.main()
