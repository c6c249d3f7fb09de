"""
Log manager: domain-level logging calls on top of DatabaseLogger
"""

from .logger import DatabaseLogger, LogLevel

PARSER_COMPONENT = "QUERY_PARSER"


class LogManager:
    """Log manager"""

    def __init__(self, name: str, log_dir: str = "logs"):
        self.logger = DatabaseLogger(name, log_dir)

    def log_parse(self, sql: str, success: bool, elapsed_ms: float, detail: str = ""):
        """Record one parse call; failures go to ERROR"""
        status = "succeeded" if success else "failed"
        flat_sql = " ".join(sql.split())
        sql_preview = flat_sql[:100] + "..." if len(flat_sql) > 100 else flat_sql
        message = f"parse {status}: {sql_preview} ({elapsed_ms:.3f}ms)"
        if detail:
            message += f" - {detail}"

        if success:
            self.logger.info(message, PARSER_COMPONENT)
        else:
            self.logger.error(message, PARSER_COMPONENT)

    def log_ast(self, rendered: str):
        """Record the rendered tree of a successful parse at DEBUG"""
        self.logger.debug(f"ast: {rendered}", PARSER_COMPONENT)

    def set_log_level(self, level: LogLevel):
        self.logger.set_log_level(level)

    def close(self):
        self.logger.close()
