"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import CALC_CONFIG, LOGGING_CONFIG, CLI_EXAMPLES, validate_config
from core import CalcError, calculate, Function, Constant
from utils import format_result

logger = logging.getLogger(__name__)

DESCRIPTION = "calc -- a simple command-line calculator"

EPILOG = "\n".join([
    "Operators: + - * / % ^",
    "Functions: " + ", ".join(sorted(fn.value for fn in Function)),
    "Constants: " + ", ".join(c.value for c in Constant),
    "",
    "For default infix expressions, function arguments must be given",
    "in parenthesis. For RPN, parenthesis are illegal.",
    "",
    "Examples:",
] + ["  " + example for example in CLI_EXAMPLES])


# 其余以 '-' 开头的参数（如 "-2^2"、"-pi"）属于表达式
FLAG_OPTIONS = ("-h", "--help", "-r", "--rpn")
VALUE_OPTIONS = ("--precision", "--log_level")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="calc",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False
    )

    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate; read from standard input when omitted"
    )
    parser.add_argument(
        "-r", "--rpn",
        action="store_true",
        default=CALC_CONFIG["rpn"],
        help='Use "Reverse Polish Notation" (postfix)'
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=CALC_CONFIG["precision"],
        help="Significant digits of the printed result (default: %(default)s)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: %(default)s)"
    )
    return parser


def read_expression(args, stdin=None):
    """命令行参数用空格拼接；为空时读取全部标准输入"""
    expression = " ".join(args.expression)
    if not expression:
        expression = (stdin or sys.stdin).read()
    return expression


def main(args, stdin=None, stdout=None):
    stdout = stdout or sys.stdout
    expression = read_expression(args, stdin)

    try:
        result = calculate(expression, rpn=args.rpn)
    except CalcError as e:
        logger.debug(f"Failed to evaluate {expression!r}: {e.kind.name}")
        print(f"error: {e}", file=stdout)
        return 1

    print(format_result(result, args.precision), file=stdout)
    return 0


def split_argv(argv):
    """
    按原始顺序把命令行分成 (选项, 表达式片段)
    只有已知选项和未知的 --长选项 交给argparse；'--' 之后全部是表达式
    """
    options = []
    pieces = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            pieces.extend(args)
        elif arg in FLAG_OPTIONS:
            options.append(arg)
        elif arg in VALUE_OPTIONS:
            options.append(arg)
            value = next(args, None)
            if value is not None:
                options.append(value)
        elif arg.partition("=")[0] in VALUE_OPTIONS:
            options.append(arg)
        elif arg.startswith("--"):
            options.append(arg)
        else:
            pieces.append(arg)
    return options, pieces


def parse_args(parser, argv=None):
    if argv is None:
        argv = sys.argv[1:]
    options, pieces = split_argv(argv)
    return parser.parse_args(options + ["--"] + pieces)


def cli(argv=None):
    parser = build_parser()
    args = parse_args(parser, argv)
    if not 1 <= args.precision <= 17:
        parser.error("--precision must be between 1 and 17")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
