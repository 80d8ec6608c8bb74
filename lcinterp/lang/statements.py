"""Statements of the lc language, as produced by the parser and executed by the interpreter.

```
<term_stmt>    ::= <λ-term>
<binding_stmt> ::= <name> ("|" <name>)* "=" <λ-term>   ; every alias is bound to the same term
<command_stmt> ::= "env" | "unbind" <name> | "help"
```
"""

from abc import abstractmethod, ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from lcinterp.lang.tokens import Token
from lcinterp.pure.term import Term


class CommandKind(Enum):
    ENV = "env"
    UNBIND = "unbind"
    HELP = "help"


class StmtVisitor(ABC):

    @abstractmethod
    def visit_term_stmt(self, stmt):
        ...

    @abstractmethod
    def visit_binding_stmt(self, stmt):
        ...

    @abstractmethod
    def visit_command_stmt(self, stmt):
        ...


@dataclass
class TermStmt:
    """λ-term to be reduced to normal form."""
    term: Term
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor):
        return visitor.visit_term_stmt(self)


@dataclass
class BindingStmt:
    """Binds term to name. name may hold several aliases separated by "|"."""
    name: str
    term: Term
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    ALIAS_SEPARATOR = "|"

    @property
    def aliases(self):
        return self.name.split(BindingStmt.ALIAS_SEPARATOR)

    def accept(self, visitor):
        return visitor.visit_binding_stmt(self)


@dataclass
class CommandStmt:
    kind: CommandKind
    argument: Optional[str] = None
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor):
        return visitor.visit_command_stmt(self)
