import argparse

from polyQuadrature.compare_integrators import print_table, compare_integrators
from polyQuadrature.example_problems import PolynomialProblem
from polyQuadrature.functions import PolynomialFunction
from polyQuadrature.integrators import AnalyticalIntegrator, RiemannIntegrator

# Set up argument parser
parser = argparse.ArgumentParser(description="Compare analytical and Riemann sum integrals of a polynomial.")
parser.add_argument('--coefficients', type=float, nargs='+', default=[2, 0, 0, 4, 0, 0, 0, 5], help='polynomial coefficients, index = power of x (default: 2 0 0 4 0 0 0 5)')
parser.add_argument('--low', type=float, default=0.5, help='lower bound of integration (default: 0.5)')
parser.add_argument('--high', type=float, default=1.5, help='upper bound of integration (default: 1.5)')
parser.add_argument('--h', type=float, default=0.001, help='step size of the Riemann sum (default: 0.001)')
parser.add_argument('--float_format', type=str, default='{:g}', help="format of each result (default: '{:g}')")
parser.add_argument('--header', action='store_true', help='print the integrator names above the table')
parser.add_argument('--verbose', type=int, default=0, help='1 also prints errors against the exact answer (default: 0)')

# receive arguments from parser
args = parser.parse_args()


if __name__ == '__main__':
    functions = [PolynomialFunction(args.coefficients)]
    integrators = [AnalyticalIntegrator(), RiemannIntegrator(h=args.h)]

    print_table(functions, integrators, args.low, args.high,
                float_format=args.float_format, header=args.header)

    if args.verbose >= 1:
        problem = PolynomialProblem(args.coefficients, args.low, args.high)
        compare_integrators(integrators, problem, verbose=args.verbose)
