import io
import unittest

from lcinterp.lang.error import Verbosity
from lcinterp.lang.interpreter import HELP, Interpreter, InterpreterOptions
from lcinterp.lang.prelude import NUMERALS
from lcinterp.lang.printer import print_term


class InterpreterTestCase(unittest.TestCase):

    def setUp(self):
        self.stream = io.StringIO()
        self.interpreter = Interpreter(InterpreterOptions(output_stream=self.stream, color=False))

    def run_source(self, source):
        """Returns (evaluations, output) of running source."""
        self.stream.seek(0)
        self.stream.truncate()
        evaluations = self.interpreter.interpret(source)
        return evaluations, self.stream.getvalue()

    def test_prelude(self):
        environment = self.interpreter.environment
        for name in ["true", "false", "and", "or", "not", "if", "pair", "cons", "car", "cdr", "nil", "null", "tree",
                     "datum", "left", "right", "incr", "plus", "times", "iszero"] + NUMERALS:
            self.assertIn(name, environment)
        for num in range(10):
            self.assertIn(str(num), environment)

        self.assertEqual("", self.stream.getvalue())
        self.assertFalse(self.interpreter.logger.had_error)

    def test_term(self):
        evaluations, output = self.run_source("and true false")

        self.assertEqual(1, len(evaluations))
        self.assertEqual("λt.λf.f", print_term(evaluations[0].normal_form))
        self.assertEqual({"0", "false", "zero"}, evaluations[0].identical)
        self.assertEqual(0, evaluations[0].numeral)
        self.assertTrue(output.startswith(">>> λt.λf.f\n    ↳ equal to: 0, false, zero\n"))
        self.assertNotIn("church numeral", output)

    def test_evaluations(self):
        cases = {
            "not true": {"false", "0", "zero"},
            "or false true": {"true"},
            "if true a b": frozenset(),
            "car (cons a b)": frozenset(),
            "null nil": {"true"},
            "null (cons a b)": {"false", "0", "zero"},
            "iszero 0": {"true"},
            "iszero 3": {"false", "0", "zero"},
            "incr 8": {"9", "nine"},
            "plus 2 3": {"5", "five"},
            "times 2 3": {"6", "six"},
            "datum (tree a nil nil)": frozenset(),
        }
        for case, identical in cases.items():
            evaluations, __ = self.run_source(case)
            self.assertEqual(identical, evaluations[0].identical, case)

        self.assertEqual("a", print_term(self.run_source("if true a b")[0][0].normal_form))
        self.assertEqual("b", print_term(self.run_source("cdr (pair a b)")[0][0].normal_form))

    def test_numerals(self):
        cases = {"plus 2 3": 5, "times 3 4": 12, "12": 12, "plus 10 10": 20, "zero": 0, "true": None, "x": None}
        for case, numeral in cases.items():
            evaluations, __ = self.run_source(case)
            self.assertEqual(numeral, evaluations[0].numeral, case)

    def test_no_equivalents(self):
        evaluations, output = self.run_source("x y")
        self.assertEqual(">>> x y\n\n", output)
        self.assertEqual(frozenset(), evaluations[0].structural)

    def test_structural_equivalence(self):
        evaluations, output = self.run_source("k = \\x.free\n\\y.other")
        self.assertIn("k", evaluations[0].structural)
        self.assertNotIn("k", evaluations[0].identical)
        self.assertIn("    ↳ structurally equivalent to: ", output)
        self.assertNotIn("equal to: ", output.replace("structurally equivalent to: ", ""))

    def test_bindings(self):
        evaluations, output = self.run_source("a|b = \\x.\\y.\\z.x\n\\p.\\q.\\r.p")
        self.assertEqual({"a", "b"}, evaluations[0].identical)

        evaluations, output = self.run_source("unbind a\n\\p.\\q.\\r.p")
        self.assertEqual({"b"}, evaluations[0].identical)
        self.assertNotIn("a", self.interpreter.environment)

        evaluations, output = self.run_source("true = \\a.a\n\\t.\\f.t\n\\q.q")
        self.assertEqual(frozenset(), evaluations[0].identical)
        self.assertEqual({"true"}, evaluations[1].identical)

    def test_definition_free_variables(self):
        evaluations, __ = self.run_source("g = \\x.y\n(\\y.g) a")
        self.assertEqual("λx.y", print_term(evaluations[0].normal_form))
        self.assertEqual({"y"}, evaluations[0].normal_form.free_variable_names())

    def test_bindings_are_lazy(self):
        evaluations, __ = self.run_source("later = \\x.sooner x\nsooner = \\y.y\nlater q")
        self.assertEqual("q", print_term(evaluations[0].normal_form))

    def test_env(self):
        __, output = self.run_source("env")
        self.assertIn("true:\tλt.λf.t\n", output)
        self.assertIn("cons:\tλx.λy.λf.f x y\n", output)
        self.assertIn("nine:\tλf.λx.f (f (f (f (f (f (f (f (f x))))))))\n", output)

        plus = self.interpreter.environment.lookup("plus")
        __, output = self.run_source("unbind plus\nenv")
        self.assertNotIn("plus:", output)
        self.assertIn("times:", output)
        self.assertEqual(frozenset(), self.interpreter.environment.equivalents(plus)[0])

    def test_help(self):
        __, output = self.run_source("help")
        self.assertEqual(HELP + "\n", output)
        self.assertTrue(output.startswith("Welcome to the lc interpreter!"))

    def test_statement_errors(self):
        evaluations, output = self.run_source("unbind nope\nnot false")

        self.assertIn("error at line 1 [1, 7]: 'nope' is not bound\n  unbind nope\n  ^~~~~~\n", output)
        self.assertEqual(1, len(evaluations))
        self.assertEqual({"true"}, evaluations[0].identical)
        self.assertTrue(self.interpreter.logger.had_error)

        evaluations, output = self.run_source("a = b\nb = a\na\nfalse")
        self.assertIn("error at line 3 [1, 2]: cyclic definition: a -> b -> a", output)
        self.assertEqual(1, len(evaluations))

    def test_divergence(self):
        interpreter = Interpreter(InterpreterOptions(max_reductions=20, output_stream=io.StringIO(), color=False))
        evaluations = interpreter.interpret("(\\x.x x) (\\x.x x)\nid = \\x.x\nid")

        output = interpreter.logger.output_stream.getvalue()
        self.assertIn("error at line 1 [1, 2]: no beta normal form found within 20 reductions", output)
        self.assertEqual(1, len(evaluations))
        self.assertIn("id", interpreter.environment)

    def test_syntax_errors_abort_batch(self):
        cases = ["x = \\y.y\n(x", "x = \\y.y\nx $", "x = \\y.y\nunbind"]
        for case in cases:
            evaluations, output = self.run_source(case)
            self.assertEqual([], evaluations, case)
            self.assertNotIn("x", self.interpreter.environment, case)
            self.assertIn("error at line 2", output, case)
            self.assertTrue(self.interpreter.logger.had_error)

        evaluations, __ = self.run_source("true")
        self.assertEqual(1, len(evaluations))
        self.assertFalse(self.interpreter.logger.had_error)

    def test_verbosity(self):
        stream = io.StringIO()
        interpreter = Interpreter(InterpreterOptions(Verbosity.LOW, output_stream=stream, color=False))
        interpreter.interpret("and true false")

        self.assertEqual(
            "λ > and true false\n>>> λt.λf.f\n    ↳ equal to: 0, false, zero\n"
            "    ↳ structurally equivalent to: 0, false, zero\n    ↳ church numeral: 0\n",
            stream.getvalue()
        )


if __name__ == '__main__':
    unittest.main()
