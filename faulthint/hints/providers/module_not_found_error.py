import sys

from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, first_group, message_contains
from faulthint.normalization.models import NormalizedError

_MODULE_PATTERNS = (
    r"No module named '([^']+)'",
    r"Cannot find module ['\"]([^'\"]+)['\"]",
    r"Module not found: ['\"]?([^'\"\s]+)",
)


def module_name(message: str) -> str:
    """Extract the missing module name, or an empty string."""
    for pattern in _MODULE_PATTERNS:
        name = first_group(pattern, message, "")
        if name:
            return name
    return ""


def _is_relative(error: NormalizedError) -> bool:
    return module_name(error.message).startswith(".")


def _is_stdlib(error: NormalizedError) -> bool:
    root = module_name(error.message).split(".")[0]
    return bool(root) and root in sys.stdlib_module_names


def _has_name(error: NormalizedError) -> bool:
    return bool(module_name(error.message))


def _relative(error: NormalizedError) -> str:
    name = module_name(error.message)
    return f"""Python can't resolve the relative import: {name}

Common causes:
- The file was run as a script, so it has no parent package
- The module doesn't exist at that location inside the package
- A directory in the path is missing from the package layout

How to fix:
- Run the code as a module from the project root: python -m package.module
- Check that the target file exists next to the importing module
- Switch to an absolute import: from package.module import name"""


def _stdlib(error: NormalizedError) -> str:
    name = module_name(error.message)
    root = name.split(".")[0]
    return f"""Python can't find "{name}", which belongs to the standard library module "{root}".

This is unusual because "{root}" ships with Python itself.

How to fix:
- Look for a local file or folder named {root}.py or {root}/ that shadows it
- Check that the submodule name is spelled correctly
- Check your interpreter: some distributions split modules into extra packages
- Make sure the module exists in this Python version"""


def _package(error: NormalizedError) -> str:
    name = module_name(error.message)
    distribution = name.split(".")[0].split("/")[0]
    return f"""Python can't find the package: {name}

Common causes:
- The package isn't installed in the active environment
- The import name differs from the name on the package index
- The code runs under a different interpreter or virtualenv than you think
- There's a typo in the import statement

How to fix:
- Install the package: python -m pip install {distribution}
- Check which interpreter runs your code: python -c "import sys; print(sys.executable)"
- Activate the project's virtual environment before running
- Check the package documentation for the correct import name"""


def _cannot_import_name(error: NormalizedError) -> str:
    name = first_group(r"cannot import name '([^']+)'", error.message, "name")
    source = first_group(r"from '([^']+)'", error.message, "the module")
    return f"""The module "{source}" was found, but it doesn't define "{name}".

Common causes:
- The name is misspelled or was renamed in a newer version
- Two modules import each other (circular import), so one is only half loaded
- A local file shadows the package you meant to import

How to fix:
- Check the spelling of {name} against the module's contents
- Check the installed version: python -m pip show {source.split('.')[0]}
- Move the import inside the function that needs it to break a circular import
- Rename local files that share a name with the package"""


class ModuleNotFoundErrorHints(BaseHintProvider):
    category = "ModuleNotFoundError"
    claims = ("ImportError",)
    rules = (
        HintRule(message_contains("cannot import name"), _cannot_import_name),
        HintRule(_is_relative, _relative),
        HintRule(_is_stdlib, _stdlib),
        HintRule(_has_name, _package),
    )

    def generic(self, error: NormalizedError) -> str:
        return """Python couldn't find a module you tried to import.

This typically happens when:
- The module name is misspelled
- The package is not installed in the active environment
- The module lives in a folder that is not on sys.path

How to fix:
- Install missing packages: python -m pip install <package>
- Check the spelling of the import
- Run from the project root, or install your project with: python -m pip install -e .
- Print sys.path to see where Python looks for modules"""


PROVIDER = ModuleNotFoundErrorHints
