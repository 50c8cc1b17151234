"""
Slug input and post file helpers.
"""

# Standard Library
import os
import re
import sys


SLUG_PROMPT = "Enter post slug (e.g., 'my-awesome-post'): "
SLUG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


#============================================
def read_slug(stream=None, prompt: str = SLUG_PROMPT) -> str:
	"""
	Prompt on stdout and block for one line of slug text.
	"""
	if stream is None:
		stream = sys.stdin
	sys.stdout.write(prompt)
	sys.stdout.flush()
	line = stream.readline()
	if not line:
		raise ValueError("No slug provided (end of input).")
	return line.strip()


#============================================
def validate_slug(slug: str, strict: bool = True) -> str:
	"""
	Check a slug is safe to use as a file name and return it.

	Non-strict mode only rejects empty input.
	"""
	if not slug:
		raise ValueError("Slug must not be empty.")
	if not strict:
		return slug
	if ".." in slug:
		raise ValueError(f"Slug must not contain '..': {slug}")
	if not SLUG_RE.match(slug):
		raise ValueError(
			"Slug may only contain letters, digits, '.', '_' and '-' "
			+ f"and must start with a letter or digit: {slug}"
		)
	return slug


#============================================
def build_new_content_arg(section: str, slug: str) -> str:
	"""
	Build the content path handed to `hugo new`.
	"""
	return f"{section}/{slug}.md"


#============================================
def build_post_path(site_root: str, content_dir: str, slug: str) -> str:
	"""
	Build the path of the scaffolded post file.
	"""
	return os.path.normpath(os.path.join(site_root, content_dir, f"{slug}.md"))


#============================================
def append_formatted_content(post_path: str, formatted: bytes) -> None:
	"""
	Append one blank line and the formatter output to the post.
	"""
	with open(post_path, "ab") as handle:
		handle.write(b"\n")
		handle.write(formatted)
