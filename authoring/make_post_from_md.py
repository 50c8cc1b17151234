#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
from datetime import datetime

import rich.console
import yaml

from postlib import external_tools
from postlib import post_paths
from postlib import post_settings


PROGRAM_NAME = "make-post-from-md"
DESCRIPTION = "Creates a new Hugo post from a markdown file."
SUCCESS_MARK = "✓"


#============================================
class PostArgumentParser(argparse.ArgumentParser):
	"""
	Argument parser that reports usage errors with exit status 1.
	"""

	def error(self, message: str) -> None:
		self.print_help(sys.stderr)
		self.exit(1, f"\nError: {message}\n")


#============================================
def log_step(console: rich.console.Console, message: str, style: str = "cyan") -> None:
	"""
	Print one timestamped progress line with color.
	"""
	now_text = datetime.now().strftime("%H:%M:%S")
	console.print(f"[make_post_from_md {now_text}] {message}", style=style, markup=False, highlight=False)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command-line arguments.
	"""
	parser = PostArgumentParser(
		prog=PROGRAM_NAME,
		description=DESCRIPTION,
	)
	parser.add_argument(
		"markdown_file",
		help="Path to the markdown file to convert into a post.",
	)
	parser.add_argument(
		"--slug",
		default=None,
		help="Post slug; prompts on stdin when omitted.",
	)
	parser.add_argument(
		"--settings",
		default=post_settings.DEFAULT_SETTINGS_PATH,
		help="YAML settings path for hugo/mdformat commands and slug checks.",
	)
	parser.add_argument(
		"--site-root",
		default=".",
		help="Hugo site directory where `hugo new` runs (default: cwd).",
	)
	args = parser.parse_args(argv)
	return args


#============================================
def report_error(message: str) -> int:
	"""
	Print one error line to stderr and return the failure status.
	"""
	print(f"Error: {message}", file=sys.stderr)
	return 1


#============================================
def main(argv: list[str] | None = None) -> int:
	"""
	Scaffold a Hugo post and append the formatted markdown draft to it.
	"""
	args = parse_args(argv)
	console = rich.console.Console(stderr=True)
	input_path = args.markdown_file
	site_root = args.site_root

	if not os.path.isfile(input_path):
		return report_error(f"File '{input_path}' not found")

	try:
		settings, settings_path = post_settings.load_settings(args.settings, site_root)
		hugo_command = post_settings.get_hugo_command(settings)
		section = post_settings.get_hugo_section(settings)
		content_dir = post_settings.get_content_dir(settings)
		mdformat_command = post_settings.get_mdformat_command(settings)
		mdformat_args = post_settings.get_mdformat_args(settings)
		strict_slug = post_settings.get_setting_bool(settings, ["post", "validate_slug"], True)
	except (RuntimeError, ValueError, OSError, yaml.YAMLError) as error:
		return report_error(str(error))
	log_step(console, f"Using settings file: {settings_path}")

	try:
		if args.slug is None:
			slug = post_paths.read_slug()
		else:
			slug = args.slug.strip()
		slug = post_paths.validate_slug(slug, strict_slug)
	except ValueError as error:
		return report_error(str(error))
	if not strict_slug:
		log_step(console, "Slug validation disabled; using slug verbatim.", style="yellow")

	content_arg = post_paths.build_new_content_arg(section, slug)
	post_path = post_paths.build_post_path(site_root, content_dir, slug)
	if os.path.exists(post_path):
		return report_error(f"Post already exists: {post_path}")

	try:
		external_tools.require_tool(hugo_command)
		external_tools.require_tool(mdformat_command)
	except (RuntimeError, ValueError) as error:
		return report_error(str(error))

	try:
		log_step(console, f"Scaffolding {content_arg} with `{hugo_command} new`.")
		external_tools.run_hugo_new(hugo_command, content_arg, site_root)
		if not os.path.isfile(post_path):
			return report_error(
				f"Scaffolded post not found at {post_path}; "
				+ "check hugo.section and hugo.content_dir settings."
			)

		log_step(console, f"Formatting {input_path} with `{mdformat_command}`.")
		formatted = external_tools.run_mdformat(mdformat_command, input_path, mdformat_args)
	except subprocess.CalledProcessError as error:
		log_step(
			console,
			f"Command failed: {' '.join(error.cmd)} (exit={error.returncode})",
			style="red",
		)
		if error.returncode > 0:
			return error.returncode
		return 1
	except OSError as error:
		return report_error(str(error))

	if not formatted.strip() and os.path.getsize(input_path) > 0:
		# stock mdformat rewrites files in place unless given "-"
		log_step(
			console,
			"Formatter produced no output; check mdformat.command prints to stdout.",
			style="yellow",
		)

	try:
		post_paths.append_formatted_content(post_path, formatted)
	except OSError as error:
		return report_error(f"Could not append to {post_path}: {error}")
	log_step(console, f"Appended {len(formatted)} bytes to {post_path}", style="green")
	print(f"{SUCCESS_MARK} Post created successfully at: {post_path}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
