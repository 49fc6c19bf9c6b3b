# argument parsing, path handling and script timing
import argparse
import os
import sys
import json
import time

# finiteness check of operands
import math

# for type hinting
from typing import Optional

# custom modules for evaluation and plotting
from trigcalc import Angle
from trigcalc import trig_evaluation as trig
from trigcalc import visualization as vis


DEFAULT_CONFIG = {
    "visualize": False,
    "plot_periods": 1,
    "plot_samples": 2000,
    "plot_y_limit": 10.0,
    "report_time": False,
}

DEFAULT_CONFIG_PATH = [os.path.dirname(os.path.abspath(__file__)), "cfg", "config.json"]

USAGE = ("calculator -o <operation> [operands...] [-m <mode>]\n"
         "       calculator --operation <operation> [operands...] --mode <mode>")

DESCRIPTION = """\
Supported operations:
  tangent     - tangent
  cotangent   - cotangent

Modes:
  deg         - degrees (default)
  rad         - radians

Number of operands: 1
The operand must be a finite number, inf and nan are rejected."""

EXAMPLES = """\
Examples:
  calculator -o tangent 45
  calculator --operation cotangent --mode rad 0.785
  calculator -o tangent -m deg 60"""


class CalculatorArgumentParser(argparse.ArgumentParser):
    """
    argparse exits with status 2 on bad arguments, the calculator reports every argument error with status 1
    """
    def error(self, message):
        self.exit(1, f"Error: {message}\n")


def parse_mode(value: str) -> str:
    if value not in Angle.UNITS:
        raise argparse.ArgumentTypeError("invalid mode. Use 'deg' or 'rad'")
    return value


def parse_operand(value: str) -> float:
    try:
        operand = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid operand format: {value}")

    # fmod and tan reject infinities, nan has no pole classification
    if not math.isfinite(operand):
        raise argparse.ArgumentTypeError(f"invalid operand format: {value}")

    return operand


def build_parser() -> CalculatorArgumentParser:
    parser = CalculatorArgumentParser(prog="calculator", usage=USAGE, description=DESCRIPTION, epilog=EXAMPLES,
                                      formatter_class=argparse.RawDescriptionHelpFormatter, allow_abbrev=False)

    parser.add_argument("-o", "--operation", help="operation to perform: tangent or cotangent")
    parser.add_argument("-m", "--mode", type=parse_mode, default="deg", help="angle unit: deg (default) or rad")
    parser.add_argument("operands", nargs="*", type=parse_operand, help="angle to evaluate (exactly one)")

    return parser


def parse_arguments(parser: CalculatorArgumentParser, argv: list[str]) -> argparse.Namespace:
    """
    parses the command line; argparse only recognizes plain negative numbers like -45 or -.5,
    so leftovers such as -1e-3 or -5. are given a second chance as operands

    :param parser: calculator argument parser
    :param argv: command line arguments without the program name
    :return: parsed arguments with all operands collected
    """
    args, extras = parser.parse_known_intermixed_args(argv)

    for token in extras:
        try:
            args.operands.append(parse_operand(token))
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

    return args


def load_config(path: Optional[str] = None) -> dict:
    """
    loads the global config dictionary; keys missing from the file keep their defaults

    :param path: path to a json config, falls back to $TRIGCALC_CONFIG and then cfg/config.json
    :return: config dictionary
    """
    if path is None:
        path = os.environ.get("TRIGCALC_CONFIG", os.path.join(*DEFAULT_CONFIG_PATH))

    cfg = dict(DEFAULT_CONFIG)

    if os.path.isfile(path):
        with open(path) as file:
            cfg.update(json.load(file))

    return cfg


def format_result(operation: str, angle: Angle.Angle, result: float) -> str:
    return f"{trig.FUNCTION_NAMES[operation]}({angle.value():g}{angle.suffix()}) = {result:.6f}"


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    # without any argument only the usage is shown
    if not argv:
        parser.print_help()
        return 1

    args = parse_arguments(parser, argv)

    if len(args.operands) != 1:
        print(f"Error: exactly 1 operand required, got {len(args.operands)}", file=sys.stderr)
        return 1

    if not args.operation:
        print("Error: operation not specified", file=sys.stderr)
        parser.print_help()
        return 1

    if args.operation not in trig.OPERATIONS:
        print(f"Error: unknown operation: {args.operation}", file=sys.stderr)
        parser.print_help()
        return 1

    cfg = load_config()

    # track evaluation runtime
    start = time.time()

    angle = Angle.Angle(args.operands[0], unit=args.mode)
    result = trig.evaluate(args.operation, angle.value(), angle.unit())

    if cfg["report_time"]:
        print(f"Finished in {time.time() - start:.2f}s.", file=sys.stderr)

    if isinstance(result, trig.DomainError):
        print(f"Calculation error: {result.message()}", file=sys.stderr)
        if cfg["visualize"]:
            vis.plot_evaluation(args.operation, angle, None, cfg)
        return 1

    print(format_result(args.operation, angle, result))

    if cfg["visualize"]:
        vis.plot_evaluation(args.operation, angle, result, cfg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
