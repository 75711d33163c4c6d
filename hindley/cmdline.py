"""
This infers the most general type of small programs written as JSON trees.

{0}

For example:

    hindley program.json

will print the type of program.json if it has one, or else try to explain why not.

    hindley --demo

will run the built-in sample programs.

    hindley -h

will explain all the arguments.
"""
import sys, json, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="hindley",
	description="Hindley-Milner type inference for a tiny expression language.",
)
parser.add_argument("program", nargs="*", help="JSON file(s) holding an expression tree.")
parser.add_argument('-d', "--demo", action="store_true", help="Infer the built-in sample programs.")
parser.add_argument('-j', "--json", action="store_true", help="Print each program and its type as JSON.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")
parser.add_argument("--max-issues", type=int, default=3, help="Give up after this many problems.")

def _show(program, outcome, label, args):
	from .serial import outcome_to_json
	if args.json:
		print(json.dumps(outcome_to_json(program, outcome), indent=2))
	else:
		print("%s: %s" % (label, outcome))

def _check_file(path:Path, args, report):
	from .serial import load_program, MalformedProgram
	from .type_inference import check_program
	try:
		program = load_program(path)
	except MalformedProgram as ex:
		report.malformed_program(path, ex)
		return
	except FileNotFoundError:
		report.no_such_file(path)
		return
	except (OSError, ValueError, RecursionError) as ex:
		report.broken_file(path, ex)
		return
	try:
		typing = check_program(program, report, path)
	except RecursionError as ex:
		# Nested too deeply to walk.
		report.broken_file(path, ex)
		return
	if typing is not None:
		_show(program, typing, path, args)

def _demo(args, report):
	from .samples import SAMPLES
	from .failures import InferenceError
	from .type_inference import infer_type
	for sample in SAMPLES:
		report.info("Sample", sample.name, ":", sample.program)
		try:
			outcome = infer_type(sample.program)
		except InferenceError as ex:
			outcome, got = ex, type(ex).__name__
		else:
			got = str(outcome)
		if got == sample.expect:
			_show(sample.program, outcome, sample.name, args)
		else:
			report.unexpected_outcome(sample.name, sample.expect, got)

def run(args):
	from .diagnostics import Report, TooManyIssues
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	try:
		if args.demo:
			_demo(args, report)
		for name in args.program:
			_check_file(Path(name), args, report)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
