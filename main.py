import sys

from sextant import Argument, Option, ParseResult, Parser, option

parser = Parser(
    "Sample Application",
    "9.9.9.9",
    "This is a sample application description. The string here will be broken into "
    "multiple lines if it overlaps the maximum line width.",
)

shown = []


@parser.register
@option("-v", "--version", descr="Shows the application version.", mandatory=False)
def version(binding):
    shown.append(binding.name)
    return True


parser.register(Option(
    "--mandatory",
    descr="This a mandatory argument and it expects two following args {arg1} and {arg2}.",
    arguments=(Argument("arg1", "The argument 1."), Argument("arg2", "The argument 2.")),
))


if __name__ == '__main__':
    result = parser.parse()
    if result == ParseResult.OK:
        print("Parsing OK!")
        print("Argument 1:", parser.lookup("--mandatory").value("arg1"))
        print("Argument 2:", parser.lookup("--mandatory").value("arg2"))
    if shown:
        print("Showing application version:", parser.version)
    sys.exit(0 if result in (ParseResult.OK, ParseResult.HELP_REQUESTED) else 1)
