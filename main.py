#!/usr/bin/env python3
"""
CQL query parser entry point
"""

import sys

from db_logging import LogManager
from interface import format_parse_error, format_query_result, interactive_sql_shell
from query_parser import QueryParsingError, SQLParser

DEMO_STATEMENTS = [
    "CREATE TABLE user_sessions (user_id UUID, session_id UUID, timestamp TIMESTAMP, "
    "device_type TEXT, PRIMARY KEY ((user_id, session_id), timestamp))",
    "ALTER TABLE user_sessions ADD (country TEXT, active BOOL), DROP device_type",
    """INSERT INTO user_sessions (user_id, session_id, timestamp, country)
       VALUES ('3e3be9fb-5888-4b0e-8f22-287b7d90a32f', 'a1', '2024-11-01 00:00:00', 'PL')""",
    """SELECT user_id, timestamp
       FROM user_sessions
       WHERE user_id = '3e3be9fb-5888-4b0e-8f22-287b7d90a32f'
       AND timestamp >= '2024-10-21 00:00:00'""",
    "UPDATE user_sessions SET active = TRUE WHERE session_id = 'a1'",
    "DELETE country FROM user_sessions WHERE session_id = 'a1'",
    "DROP TABLE user_sessions",
    "TRUNCATE user_sessions",
    "SELECT FROM user_sessions",
]


def run_demo():
    """Parse a fixed set of statements and print each AST"""
    print("🗄️  CQL parser demo")
    print("=" * 40)
    parser = SQLParser()
    for i, sql in enumerate(DEMO_STATEMENTS, 1):
        print(f"\n[{i}/{len(DEMO_STATEMENTS)}] {' '.join(sql.split())}")
        try:
            query = parser.parse(sql)
        except QueryParsingError as e:
            format_parse_error(e)
            continue
        format_query_result(query)


def run_parse(sql: str) -> int:
    try:
        query = SQLParser().parse(sql)
    except QueryParsingError as e:
        format_parse_error(e)
        return 1
    format_query_result(query)
    return 0


def main():
    if len(sys.argv) > 1:
        command = sys.argv[1].lower()

        if command == "demo":
            run_demo()
            return
        elif command == "parse" and len(sys.argv) > 2:
            sys.exit(run_parse(" ".join(sys.argv[2:])))
        elif command == "shell":
            log_dir = sys.argv[2] if len(sys.argv) > 2 else "logs"
            log_manager = LogManager("query_parser", log_dir)
            try:
                interactive_sql_shell(SQLParser(log_manager))
            finally:
                log_manager.close()
            return

    print("🗄️  CQL query parser")
    print("=" * 40)
    print("Usage:")
    print('  python main.py parse "<statement>"   # parse one statement')
    print("  python main.py shell [log_dir]       # interactive shell, parses logged to log_dir")
    print("  python main.py demo                  # parse a set of sample statements")


if __name__ == "__main__":
    main()
