from faulthint.hints.base import BaseHintProvider
from faulthint.hints.codes import FILE_SYSTEM_CATEGORY
from faulthint.hints.rules import HintRule, any_of, code_is, first_group, message_contains_ci
from faulthint.normalization.models import NormalizedError


def _path(error: NormalizedError, default: str) -> str:
    original = error.original
    filename = getattr(original, "filename", None) if isinstance(original, OSError) else None
    if filename:
        return str(filename)
    return first_group(r"'([^']+)'", error.message, default)


def _not_found(error: NormalizedError) -> str:
    path = _path(error, "file or directory")
    return f"""Python can't find the file or directory: {path}

This ENOENT error happens when you access a path that doesn't exist.

Common causes:
- The file was deleted or moved
- There's a typo in the path
- A relative path is resolved from a different working directory than you expect
- The parent directory hasn't been created yet

How to fix:
- Check the path exists: Path("{path}").exists()
- Print the working directory: print(Path.cwd())
- Build paths relative to the module: Path(__file__).parent / "data.txt"
- Create directories first: path.mkdir(parents=True, exist_ok=True)"""


def _permission(error: NormalizedError) -> str:
    path = _path(error, "the file")
    return f"""You don't have permission to access: {path}

Common causes:
- The file is owned by another user
- The file or directory has restrictive permissions
- You're writing into a protected system directory
- On Windows, another program has the file open

How to fix:
- Check permissions with: ls -l (or the Security tab on Windows)
- Adjust them, for example: chmod u+rw {path}
- Write to a directory your user owns, such as a temporary directory
- Close other programs that hold the file open"""


def _exists(error: NormalizedError) -> str:
    path = _path(error, "the path")
    return f"""The file or directory already exists: {path}

How to fix:
- Pass exist_ok=True to Path.mkdir() or os.makedirs()
- Check first with Path.exists() and decide whether to overwrite
- Use a unique name, for example with tempfile or a timestamp"""


def _is_directory(error: NormalizedError) -> str:
    path = _path(error, "the path")
    return f"""A file operation was used on a directory: {path}

How to fix:
- Point to a file inside the directory instead
- Use Path.is_dir() to tell files and directories apart
- Use shutil.rmtree() or os.rmdir() to remove directories"""


def _not_directory(error: NormalizedError) -> str:
    path = _path(error, "the path")
    return f"""Part of the path is a file but is used like a directory: {path}

How to fix:
- Check each component of the path
- Look for a file that has the same name as a directory you expect"""


def _too_many_files(_error: NormalizedError) -> str:
    return """The process has too many files open at once.

How to fix:
- Open files with a with block so they are closed automatically
- Close files, sockets and subprocess pipes you no longer need
- Process files in smaller batches"""


def _no_space(_error: NormalizedError) -> str:
    return """The disk or file system is full or read-only.

How to fix:
- Free up disk space, or write to another volume
- Check mount options if the file system is read-only
- Clean up temporary files created by your program"""


class FileSystemErrorHints(BaseHintProvider):
    category = FILE_SYSTEM_CATEGORY
    rules = (
        HintRule(
            any_of(code_is("ENOENT"), message_contains_ci("no such file or directory")),
            _not_found,
        ),
        HintRule(
            any_of(code_is("EACCES", "EPERM"), message_contains_ci("permission denied")),
            _permission,
        ),
        HintRule(
            any_of(code_is("EEXIST"), message_contains_ci("file exists", "already exists")),
            _exists,
        ),
        HintRule(
            any_of(code_is("EISDIR"), message_contains_ci("is a directory")),
            _is_directory,
        ),
        HintRule(
            any_of(code_is("ENOTDIR"), message_contains_ci("not a directory")),
            _not_directory,
        ),
        HintRule(
            any_of(code_is("EMFILE", "ENFILE"), message_contains_ci("too many open files")),
            _too_many_files,
        ),
        HintRule(
            any_of(code_is("ENOSPC", "EROFS"), message_contains_ci("no space left")),
            _no_space,
        ),
    )

    def generic(self, error: NormalizedError) -> str:
        code = f" ({error.code})" if error.code else ""
        return f"""A file system operation failed{code}.

How to fix:
- Check that the path exists and is spelled correctly
- Check file and directory permissions
- Make sure no other process is locking the file"""


PROVIDER = FileSystemErrorHints
