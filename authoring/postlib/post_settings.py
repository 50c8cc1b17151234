import os

import yaml


DEFAULT_SETTINGS_PATH = "settings.yaml"


#============================================
def resolve_settings_path(path_text: str, site_root: str = ".") -> str:
	"""
	Resolve settings path against cwd first, then the site root.
	"""
	if os.path.isabs(path_text):
		return path_text
	cwd_candidate = os.path.abspath(path_text)
	if os.path.isfile(cwd_candidate):
		return cwd_candidate
	site_candidate = os.path.join(site_root, path_text)
	return os.path.abspath(site_candidate)


#============================================
def load_settings(path_text: str, site_root: str = ".") -> tuple[dict, str]:
	"""
	Load YAML settings dict and return it with resolved path.
	"""
	resolved_path = resolve_settings_path(path_text, site_root)
	if not os.path.isfile(resolved_path):
		return {}, resolved_path
	with open(resolved_path, "r", encoding="utf-8") as handle:
		data = yaml.safe_load(handle.read())
	if data is None:
		return {}, resolved_path
	if not isinstance(data, dict):
		raise RuntimeError(f"Settings file must contain a mapping: {resolved_path}")
	return data, resolved_path


#============================================
def get_nested_value(settings: dict, keys: list[str], default_value):
	"""
	Read nested mapping value by key path.
	"""
	current = settings
	for key in keys:
		if not isinstance(current, dict):
			return default_value
		if key not in current:
			return default_value
		current = current[key]
	return current


#============================================
def get_setting_str(settings: dict, keys: list[str], default_value: str) -> str:
	"""
	Read a string setting from nested path with fallback.
	"""
	value = get_nested_value(settings, keys, default_value)
	if value is None:
		return default_value
	if isinstance(value, (dict, list)):
		raise RuntimeError(f"Invalid string for setting path {'.'.join(keys)}: {value}")
	return str(value).strip()


#============================================
def get_setting_bool(settings: dict, keys: list[str], default_value: bool) -> bool:
	"""
	Read a boolean setting from nested path with fallback.
	"""
	value = get_nested_value(settings, keys, default_value)
	if isinstance(value, bool):
		return value
	if isinstance(value, str):
		text = value.strip().lower()
		if text in {"1", "true", "yes", "on"}:
			return True
		if text in {"0", "false", "no", "off"}:
			return False
		raise RuntimeError(f"Invalid boolean for setting path {'.'.join(keys)}: {value}")
	if isinstance(value, int):
		return value != 0
	if value is None:
		return default_value
	raise RuntimeError(f"Invalid boolean for setting path {'.'.join(keys)}: {value}")


#============================================
def get_setting_str_list(settings: dict, keys: list[str], default_value: list[str]) -> list[str]:
	"""
	Read a list of strings from nested path with fallback.

	A bare string is treated as a one-item list.
	"""
	value = get_nested_value(settings, keys, default_value)
	if value is None:
		return list(default_value)
	if isinstance(value, str):
		return [value]
	if not isinstance(value, list):
		raise RuntimeError(f"Invalid list for setting path {'.'.join(keys)}: {value}")
	items = []
	for item in value:
		if isinstance(item, (dict, list)) or item is None:
			raise RuntimeError(f"Invalid list item for setting path {'.'.join(keys)}: {item}")
		items.append(str(item))
	return items


#============================================
def get_hugo_command(settings: dict) -> str:
	"""
	Resolve the site generator command string.
	"""
	value = get_setting_str(settings, ["hugo", "command"], "hugo")
	if not value:
		raise RuntimeError("Invalid settings: hugo.command must not be empty.")
	return value


#============================================
def get_hugo_section(settings: dict) -> str:
	"""
	Resolve the archetype section passed to `hugo new`.
	"""
	value = get_setting_str(settings, ["hugo", "section"], "post")
	return value.strip("/") or "post"


#============================================
def get_content_dir(settings: dict) -> str:
	"""
	Resolve the directory where the generator writes new posts.
	"""
	value = get_setting_str(settings, ["hugo", "content_dir"], "content/posts")
	return value.rstrip("/") or "content/posts"


#============================================
def get_mdformat_command(settings: dict) -> str:
	"""
	Resolve the Markdown formatter command string.
	"""
	value = get_setting_str(settings, ["mdformat", "command"], "mdformat")
	if not value:
		raise RuntimeError("Invalid settings: mdformat.command must not be empty.")
	return value


#============================================
def get_mdformat_args(settings: dict) -> list[str]:
	"""
	Resolve extra formatter arguments placed before the input path.
	"""
	return get_setting_str_list(settings, ["mdformat", "args"], [])
