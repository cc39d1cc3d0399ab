"""主程序入口 - 单个表达式 / 批量文件 / 交互模式"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from core import evaluate
from calculator import CalculatorSession, ExpressionEvaluator
from data.data_loader import load_expressions
from utils.formatting import format_display

logger = logging.getLogger(__name__)


def run_single(expression):
    """求值一个表达式并打印；返回退出码"""
    result = evaluate(expression)
    if not result.is_ok:
        print(f"Error: {result.failure.message}", file=sys.stderr)
        return 1
    print(format_display(result.value))
    return 0


def run_batch(file_path, column='expression', output_path=None):
    """批量求值文件中的表达式；返回退出码（有失败行也视为完成）"""
    expressions = load_expressions(file_path, column)
    evaluator = ExpressionEvaluator()
    frame = evaluator.evaluate_many(expressions)

    if output_path:
        logger.info(f"Saving results to {output_path}")
        frame.to_csv(output_path, index=False)
    else:
        for expression, display in zip(frame['expression'], frame['display']):
            print(f"{expression} = {display}")

    logger.info(f"Evaluated {len(frame)} expressions, cache: {evaluator.cache_info}")
    return 0


def run_interactive(stdin=None, stdout=None):
    """
    交互模式：每行是一个按键（如 7、+、Enter、m+、s），或一段表达式文本（逐字符输入）。
    空行等同于 Enter，输入 q 退出。
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    session = CalculatorSession()

    for raw_line in stdin:
        line = raw_line.rstrip('\n')
        if line.strip() == 'q':
            break
        if not line.strip():
            session.press('Enter')
        elif not session.press(line.strip()):
            for ch in line:
                if not ch.isspace():
                    session.press(ch)

        expression_line, result_line = session.display()
        status = f" [{session.flash}]" if session.flash else ''
        print(f"{expression_line} | {result_line}{status}", file=stdout)
    return 0


def main(args):
    validate_config()

    if args.file:
        return run_batch(args.file, args.column, args.output_path)
    if args.interactive:
        return run_interactive()
    if args.expression is None:
        logger.error("No expression given")
        return 2
    return run_single(args.expression)


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression calculator")
    # 单个表达式、批量文件、交互模式三选一
    mode = parser.add_mutually_exclusive_group()

    mode.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Infix expression to evaluate, e.g. \"(2+3)*4\""
    )
    mode.add_argument(
        "--file",
        type=str,
        default=None,
        help="Evaluate every expression in a .csv or text file"
    )
    parser.add_argument(
        "--column",
        type=str,
        default="expression",
        help="Column holding the expressions when --file is a CSV"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV"
    )
    mode.add_argument(
        "--interactive",
        action="store_true",
        help="Read key presses line by line from stdin"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
