from sprig.reader.estree import loads, read_program, read_statement, read_expression

__all__ = ["loads", "read_program", "read_statement", "read_expression"]
