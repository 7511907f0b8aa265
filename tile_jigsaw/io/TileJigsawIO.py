from typing import List

from cleo.formatters.style import Style
from cleo.io.inputs.input import Input
from cleo.io.io import IO
from cleo.io.outputs.output import Output, Verbosity


class TileJigsawIO(IO):
    """
    Output decorator with the styles and log methods of TileJigsaw.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, input: Input, output: Output, error_output: Output):
        """
        Object constructor.

        :param input: The input.
        :param output: The output.
        :param error_output: The error output.
        """
        IO.__init__(self, input, output, error_output)

        for formatter in (output.formatter, error_output.formatter):
            formatter.set_style('fso', Style('green', options=['bold']))
            formatter.set_style('title', Style('yellow', options=['bold']))
            formatter.set_style('error', Style('white', 'red'))

    # ------------------------------------------------------------------------------------------------------------------
    def title(self, message: str) -> None:
        """
        Writes a title.

        :param message: The title.
        """
        self.write_line([f'<title>{message}</>', f'<title>{"=" * len(message)}</>', ''])

    # ------------------------------------------------------------------------------------------------------------------
    def text(self, message: str) -> None:
        """
        Writes a line of text.

        :param message: The text.
        """
        self.write_line(message)

    # ------------------------------------------------------------------------------------------------------------------
    def log_notice(self, message: str) -> None:
        """
        Logs a message at normal verbosity.

        :param message: The message.
        """
        self.write_line(message, Verbosity.NORMAL)

    # ------------------------------------------------------------------------------------------------------------------
    def log_verbose(self, message: str) -> None:
        """
        Logs a message when verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def log_very_verbose(self, message: str) -> None:
        """
        Logs a message when very verbose output is enabled.

        :param message: The message.
        """
        self.write_line(message, Verbosity.VERY_VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def error(self, lines: List[str]) -> None:
        """
        Writes an error block on the error output.

        :param lines: The lines of the error message.
        """
        width = max(len(line) for line in lines) + 4
        block = [' ' * width] + [f'  {line}'.ljust(width) for line in lines] + [' ' * width]

        self.write_error_line('')
        for line in block:
            self.write_error_line(f'<error>{line}</>')
        self.write_error_line('')

# ----------------------------------------------------------------------------------------------------------------------
