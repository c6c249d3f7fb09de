"""
Interactive parse shell
"""

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from catalog import ColumnType
from db_logging import LogLevel
from query_parser import QueryParsingError, SQLParser
from .formatter import format_parse_error, format_query_result

KEYWORDS = [
    "SELECT", "FROM", "WHERE", "AND", "INSERT INTO", "VALUES", "UPDATE", "SET",
    "DELETE", "CREATE TABLE", "ALTER TABLE", "DROP TABLE", "ADD", "DROP",
    "PRIMARY KEY", "TRUE", "FALSE",
]


def strip_comment(line: str) -> str:
    """Drop a '#' comment; a '#' inside a quoted string is kept"""
    in_string = False
    for i, char in enumerate(line):
        if char == "'":
            in_string = not in_string
        elif char == "#" and not in_string:
            return line[:i]
    return line


class SQLCompleter(Completer):
    """Completes statement keywords, column types and shell commands"""

    def __init__(self):
        self.words = KEYWORDS + [t.value for t in ColumnType] + ["help", "quit", "exit", "loglevel"]

    def get_completions(self, document: Document, complete_event):
        word = document.get_word_before_cursor(WORD=True)
        if not word:
            return
        low = word.lower()
        for candidate in self.words:
            if candidate.lower().startswith(low) and candidate.lower() != low:
                yield Completion(candidate, start_position=-len(word))


class SQLShell:
    """Reads statements, parses them and prints the resulting AST"""

    def __init__(self, parser: SQLParser, session=None):
        self.parser = parser
        self.running = True
        self._session = session

    def start(self):
        print("=" * 60)
        print("🗄️  CQL parse shell")
        print("=" * 60)
        print("Type 'help' for help, 'quit' or 'exit' to leave")
        print("Statements may span lines; an empty line submits")
        print()

        if self._session is None:
            self._session = PromptSession(completer=SQLCompleter())

        while self.running:
            try:
                user_input = self._get_input()
            except (KeyboardInterrupt, EOFError):
                break
            if user_input:
                self._process_command(user_input)
        print("Bye")

    def _get_input(self) -> Optional[str]:
        """Collect lines until an empty line; '#' starts a comment"""
        lines = []
        while True:
            line = self._session.prompt("CQL> " if not lines else "...> ")
            line = strip_comment(line).rstrip()
            if not line.strip():
                if lines:
                    break
                continue
            lines.append(line)
            # single-word shell commands do not need the extra empty line
            if len(lines) == 1 and line.strip().split()[0].lower() in ("help", "quit", "exit", "loglevel"):
                break
        return "\n".join(lines)

    def _process_command(self, command: str):
        command = command.strip()
        if not command:
            return

        lowered = command.lower()
        if lowered in ("quit", "exit"):
            self.running = False
        elif lowered == "help":
            self._show_help()
        elif lowered.startswith("loglevel"):
            self._set_log_level(command[len("loglevel"):].strip())
        else:
            self._parse(command)

    def _parse(self, sql: str):
        try:
            query = self.parser.parse(sql)
        except QueryParsingError as e:
            format_parse_error(e)
            return
        format_query_result(query)

    def _set_log_level(self, level: str):
        if self.parser.log_manager is None:
            print("❌ Logging is not enabled")
            return
        try:
            log_level = LogLevel[level.upper()]
        except KeyError:
            print(f"❌ Unknown log level: {level or '(empty)'}")
            print(f"   choose one of: {', '.join(l.name for l in LogLevel)}")
            return
        self.parser.log_manager.set_log_level(log_level)
        print(f"✅ Log level set to {log_level.name}")

    def _show_help(self):
        print(
            """
Supported statements:
  SELECT * | col, ... FROM table [WHERE col op value [AND ...]]
  INSERT INTO table (col, ...) VALUES (value, ...)
  UPDATE table SET col = value, ... [WHERE ...]
  DELETE [col, ...] FROM table [WHERE ...]
  CREATE TABLE table (col TYPE PRIMARY KEY, col TYPE, ...)
  CREATE TABLE table (col TYPE, ..., PRIMARY KEY ((p, ...), c, ...))
  ALTER TABLE table ADD col TYPE | ADD (col TYPE, ...) | DROP col | DROP (col, ...), ...
  DROP TABLE table

Column types: UUID INT LONG FLOAT DOUBLE TIMESTAMP TEXT BOOL
Operators:    =  !=  >  >=  <  <=

Shell commands:
  help               show this help
  loglevel <LEVEL>   DEBUG, INFO, WARNING, ERROR or CRITICAL
  quit | exit        leave the shell
"""
        )


def interactive_sql_shell(parser: SQLParser, session=None):
    """Start the interactive shell"""
    shell = SQLShell(parser, session)
    shell.start()
