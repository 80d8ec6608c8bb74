"""Handles interactive/command-line mode for lc interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType 'help' for more information."
    prompt = "λ > "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "λ > "     # also used for prompt swapping in line continuations

    def __init__(self, interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self._tmp_line = ""

    @staticmethod
    def needs_continuation(line):
        """Whether or not line has unclosed parentheses."""
        return line.count("(") > line.count(")")

    def default(self, line):
        """Executes arbitrary lc statement."""
        line = self._tmp_line + line

        if self.needs_continuation(line):
            self._tmp_line = line + " "
            self.prompt = self.secondary_prompt
            return

        self._tmp_line = ""
        self.prompt = self._tmp_prompt

        with self.interpreter.logger:  # needed because cmd.Cmd automatically exits on Exception
            self.interpreter.interpret(line + "\n")
        self.interpreter.logger.clear_error()

    def do_help(self, arg):
        """Shows a short intro to the language."""
        self.default("help")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
