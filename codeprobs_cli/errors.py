"""Fatal errors for codeprobs-cli.

Anything raised from here aborts the command with a nonzero exit code.
Rejections the server reports on purpose (bad password, duplicate user,
failed compile) are not errors; they are printed as outcomes instead.
"""

import click


class CodeprobsError(click.ClickException):
    """Base class for fatal errors."""


class MarkerError(CodeprobsError):
    """The current directory does not identify a problem."""


class AnswerFileError(CodeprobsError):
    """The answer source file could not be read."""


class UnknownLanguageError(CodeprobsError):
    """No language was given and none could be inferred."""


class ApiError(CodeprobsError):
    """Transport failure or a response that could not be decoded."""
