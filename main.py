from rich.pretty import pprint

from argloom import *

parser = ArgumentParser("Copy blocks from a source into OUTPUT.", shell=True)

parser.add_mutually_exclusive_group("source", mandatory=True)
parser.register_option(("i", "input"), Requirement.INHERIT_GROUP, OptionKind.STRING, "Input file", group="source")
parser.register_option(("z", "zero"), Requirement.INHERIT_GROUP, OptionKind.BOOL, "Read zeroes\ninstead of a file", group="source")
parser.register_option(("b", "block"), Requirement.OPTIONAL, OptionKind.HEX, "Block size", default="200")
parser.register_option(("c", "count"), Requirement.REQUIRED, OptionKind.INT, "Number of blocks")
parser.register_positional(1, ["OUTPUT"])


if __name__ == '__main__':
    parser.load_arguments()
    if parser.option_is_set("help"):
        parser.print_help()
    else:
        pprint({
            "input": parser.parse_option("input"),
            "zero": parser.parse_option("zero"),
            "block": parser.parse_option("block"),
            "count": parser.parse_option("count"),
            "output": parser.parse_positional(0),
        })
