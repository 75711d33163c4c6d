"""
Collecting and explaining problems.

Nothing in the inference engine prints. Failures travel as exceptions up to
whoever drives the engine, and the driver files them here. The report also
carries the verbosity setting, so progress chatter goes through it too.
"""
import sys, random
from pathlib import Path
from typing import Any, Optional, Sequence
from boozetools.support.failureprone import illustration

from .syntax import Expression, Transcript
from .failures import InferenceError

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Alas, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Nuts', 'Rats',
	]
	resignations = [
		'These types will not line up.',
		'I cannot make these types agree.',
		'I have no idea what the right type is.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def error(self, msg:str, footer:Sequence[str]=()):
		self.issue(Pic(msg, [], footer))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command line calls while loading programs:

	def _file_error(self, path:Path, prefix:str, footer:Sequence[str]=()):
		self.issue(Pic(prefix+" "+str(path), [], footer))

	def no_such_file(self, path:Path):
		self._file_error(path, "I see no file called")

	def broken_file(self, path:Path, cause:Any):
		self._file_error(path, "Something went pear-shaped while trying to read", [str(cause)])

	def malformed_program(self, path:Path, cause:Any):
		self._file_error(path, "This is not the shape of a program:", [str(cause)])

	# Methods for when the types do not work out:

	def inference_failed(self, program:Expression, failure:InferenceError, path:Optional[Path]=None):
		anns = []
		if failure.at is not None:
			transcript = Transcript(program)
			if failure.at in transcript.spans:
				anns.append(Annotation(transcript, failure.at, failure.caption))
		footer = ["(%s)" % type(failure).__name__]
		self.issue(Pic(failure.describe(), anns, footer, path))

	def unexpected_outcome(self, name:str, expected:str, got:str):
		intro = "Sample %r should come out as %s, but came out as %s." % (name, expected, got)
		self.issue(Pic(intro, []))

class Annotation:
	def __init__(self, transcript:Transcript, node:Expression, caption:str=""):
		self.text = transcript.text
		self.slice = transcript.spans[node]
		self.caption = caption
	def illustrate(self):
		width = self.slice.stop - self.slice.start
		return illustration(self.text, self.slice.start, width, prefix='    |', caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=(), path=None):
		self._intro, self._anns, self._footer, self.path = intro, anns, footer, path
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		if self.path is not None:
			lines.append(str(self.path))
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
