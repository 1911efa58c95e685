from dedekind.math.factorization.general import factor
from dedekind.math.polynomial import Polynomial
from dedekind.report import DEFAULT_INVARIANTS, INVARIANTS, Report, render
from dedekind.utilities.exceptions import DedekindException
from fractions import Fraction
import argparse
import json
import logging
import sys

log = logging.getLogger(__name__)


def _coefficient(text: str) -> Fraction:
    try:
        return Fraction(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer or rational coefficient")


def _invariant_list(text: str) -> list:
    names = [name.strip() for name in text.split(',') if name.strip()]
    for name in names:
        if name not in INVARIANTS:
            raise argparse.ArgumentTypeError(f"unknown invariant '{name}' (choose from {', '.join(INVARIANTS)})")

    return names


def _polynomial(coeffs: list, descending: bool) -> Polynomial:
    if descending:
        return Polynomial.from_descending(coeffs)

    return Polynomial(coeffs)


def _configure_logging(verbosity: int):
    from rich.console import Console
    from rich.logging import RichHandler

    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)])


def _emit(values: dict, as_json: bool, title: str):
    if as_json:
        print(json.dumps(values, indent=2))
    else:
        Report.pretty(values, title=title)


def run_invariants(args) -> int:
    f      = _polynomial(args.coefficients, args.descending)
    other  = _polynomial(args.other, args.descending) if args.other else None
    report = Report(f, other=other, visual=args.visual)
    _emit(report.compute(args.invariants), args.json, f"Invariants of {f}")
    return 0


def run_decompose(args) -> int:
    f      = _polynomial(args.coefficients, args.descending)
    report = Report(f, visual=args.visual)
    primes = report.field().prime_decomposition(args.prime)

    rows = []
    for P in primes:
        rows.append({'ideal': str(P), 'e': P.e, 'f': P.f, 'norm': render(P.norm())})

    if args.json:
        print(json.dumps({'p': str(args.prime), 'primes': rows}, indent=2))
    else:
        from rich.table import Table
        from rich import print as rprint

        table = Table(title=f"Primes above {args.prime} in Q[x]/({f})", show_lines=True)
        for name, style in zip(['Ideal', 'e', 'f', 'Norm'], ["cyan", "green", "magenta", "yellow"]):
            table.add_column(name, style="bold " + style)

        for row in rows:
            table.add_row(row['ideal'], str(row['e']), str(row['f']), row['norm'])

        rprint()
        rprint(table)

    return 0


def run_factor(args) -> int:
    facs    = factor(args.n, visual=args.visual)
    entries = [{'p': str(p), 'e': e} for p, e in facs.items()]

    if args.json:
        print(json.dumps({'entries': entries}, indent=2))
    else:
        body = ' * '.join(f'{p}^{e}' if e > 1 else f'{p}' for p, e in facs.items()) or '1'
        print(f'{args.n} = {body}')

    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', '--verbose', action='count', default=0, help="-v for progress messages, -vv for debugging detail")
    common.add_argument('--visual', action='store_true', help="show progress bars")
    common.add_argument('--json', action='store_true', help="print JSON instead of a table")

    parser = argparse.ArgumentParser(prog='dedekind', description="Invariants of number fields defined by an integer polynomial.")
    sub    = parser.add_subparsers(dest='command', required=True)

    inv = sub.add_parser('invariants', parents=[common], help="compute requested invariants of a polynomial")
    inv.add_argument('coefficients', nargs='+', type=_coefficient, help="coefficients, constant term first unless --descending")
    inv.add_argument('--descending', action='store_true', help="coefficients are given leading term first")
    inv.add_argument('--invariants', type=_invariant_list, default=list(DEFAULT_INVARIANTS), help=f"comma-separated list from: {', '.join(INVARIANTS)}")
    inv.add_argument('--other', nargs='+', type=_coefficient, help="second polynomial for the resultant")
    inv.set_defaults(func=run_invariants)

    dec = sub.add_parser('decompose', parents=[common], help="factor a rational prime into prime ideals")
    dec.add_argument('coefficients', nargs='+', type=_coefficient)
    dec.add_argument('--prime', '-p', type=int, required=True)
    dec.add_argument('--descending', action='store_true')
    dec.set_defaults(func=run_decompose)

    fac = sub.add_parser('factor', parents=[common], help="factor an integer")
    fac.add_argument('n', type=int)
    fac.set_defaults(func=run_factor)

    return parser


def main(argv: list=None) -> int:
    parser = build_parser()
    args   = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return args.func(args)
    except DedekindException as e:
        log.debug(f"{e.kind} parameters: {e.parameters}")
        print(f"error: {e.kind}: {e.message or e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
