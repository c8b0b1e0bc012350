"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import SESSION_CONFIG, LOGGING_CONFIG, validate_config
from core import evaluate
from session import CalculatorSession, JsonStorage
from utils import describe_error, format_result

logger = logging.getLogger(__name__)

PROMPT = "> "
HELP_TEXT = (
    "Enter an expression to evaluate it. Commands:\n"
    "  :history         list history, newest first\n"
    "  :recall N        restore history entry N\n"
    "  :clear           clear expression and result\n"
    "  :clear-history   delete all history\n"
    "  :quit            exit"
)


def _format_line(expr, outcome, verbose_errors=False):
    if outcome.ok:
        return f"{expr} = {format_result(outcome.value)}"
    return f"{expr} : {describe_error(outcome.error, verbose=verbose_errors)}"


def evaluate_expressions(expressions, session=None, verbose_errors=False, out=None):
    """
    依次求值并打印每个表达式

    Returns:
        全部成功返回0，否则返回1
    """
    out = out or sys.stdout
    failed = 0
    for expr in expressions:
        if session is not None:
            session.expression = expr
            outcome = session.evaluate_expression()
        else:
            outcome = evaluate(expr)
        if not outcome.ok:
            failed += 1
        print(_format_line(expr, outcome, verbose_errors), file=out)
    return 1 if failed else 0


def _run_command(session, line, out):
    """处理以 ':' 开头的命令；返回 False 表示退出"""
    parts = line[1:].split()
    command = parts[0] if parts else ''

    if command in ('quit', 'q', 'exit'):
        return False
    if command == 'history':
        entries = session.history_newest_first()
        if not entries:
            print("(no history)", file=out)
        for i, item in enumerate(entries):
            print(f"{i:>3}  {item['expr']} = {format_result(item['result'])}", file=out)
    elif command == 'recall':
        try:
            item = session.recall(int(parts[1]))
        except (IndexError, ValueError):
            print("Usage: :recall N (see :history)", file=out)
        else:
            print(f"{item['expr']} = {format_result(item['result'])}", file=out)
    elif command == 'clear':
        session.clear_all()
        print(session.display, file=out)
    elif command == 'clear-history':
        session.clear_history()
        print("History cleared", file=out)
    else:
        print(HELP_TEXT, file=out)
    return True


def interactive(session, stdin=None, out=None):
    """逐行读取输入；命令以 ':' 开头，其余行作为表达式求值"""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    interactive_tty = stdin.isatty()

    while True:
        if interactive_tty:
            print(PROMPT, end='', file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip('\n')

        if line.strip().startswith(':'):
            if not _run_command(session, line.strip(), out):
                break
            continue

        session.expression = line
        outcome = session.evaluate_expression()
        if outcome.ok:
            print(session.display, file=out)
        else:
            print(f"{session.display} ({outcome.error.value})", file=out)
    return 0


def main(args):
    validate_config()

    storage = None if args.no_persist else JsonStorage(args.state_path)
    session = CalculatorSession(storage=storage, verbose_errors=args.verbose_errors)
    session.load()

    if args.expressions:
        return evaluate_expressions(args.expressions, session=session,
                                    verbose_errors=args.verbose_errors)
    return interactive(session)


def build_parser():
    parser = argparse.ArgumentParser(description="CleanCalc expression calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; starts an interactive session when omitted"
    )
    parser.add_argument(
        "--state_path",
        type=str,
        default=SESSION_CONFIG['state_path'],
        help="Path of the JSON file holding expression, result and history"
    )
    parser.add_argument(
        "--no_persist",
        action="store_true",
        help="Do not read or write the state file"
    )
    parser.add_argument(
        "--verbose_errors",
        action="store_true",
        help="Show long error descriptions instead of short labels"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
