"""
Wrappers around the external site generator and Markdown formatter.
"""

# Standard Library
import shlex
import shutil
import subprocess


#============================================
class ToolNotFoundError(RuntimeError):
	"""
	Raised when a configured external command is not on PATH.
	"""


#============================================
def split_command(command: str) -> list[str]:
	"""
	Split a configured command string into argv tokens.
	"""
	tokens = shlex.split(command)
	if not tokens:
		raise ValueError("command is required")
	return tokens


#============================================
def require_tool(command: str) -> str:
	"""
	Resolve the executable of a configured command or raise.
	"""
	program = split_command(command)[0]
	resolved = shutil.which(program)
	if resolved is None:
		raise ToolNotFoundError(f"`{program}` command is required but not found.")
	return resolved


#============================================
def build_hugo_new_command(command: str, content_arg: str) -> list[str]:
	"""
	Build argv for `hugo new <section>/<slug>.md`.
	"""
	return split_command(command) + ["new", content_arg]


#============================================
def build_mdformat_command(command: str, input_path: str, extra_args: list[str]) -> list[str]:
	"""
	Build argv for the formatter with the input path last.
	"""
	return split_command(command) + list(extra_args) + [input_path]


#============================================
def run_hugo_new(command: str, content_arg: str, site_root: str) -> None:
	"""
	Scaffold a new content file from the site's archetype.

	Generator output passes through to the terminal.
	"""
	argv = build_hugo_new_command(command, content_arg)
	subprocess.run(argv, cwd=site_root, check=True)


#============================================
def run_mdformat(command: str, input_path: str, extra_args: list[str]) -> bytes:
	"""
	Run the formatter on one file and return its raw stdout.
	"""
	argv = build_mdformat_command(command, input_path, extra_args)
	result = subprocess.run(
		argv,
		check=True,
		stdout=subprocess.PIPE,
	)
	return result.stdout
