from rich.pretty import pprint

from shellopts import *

table = OptionTable()
table.add("-n", "--number", "required", "help=Specify some number", "dest=myNumber")
table.add("-a", "--aux", "flagTrue", "help=Another option, but without dest")
table.add("-o", "help=Option with default", "default=a b", "dest=otherO")
table.add("-c", "--config", "configFile", "help=Read option values from a file")


if __name__ == '__main__':
    namespace = Parser(table, shell=True).parse()
    pprint(dict(namespace))
    pprint(namespace.arguments)
