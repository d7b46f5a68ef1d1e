"""PEG grammar for calculator expressions.

Each precedence level is written as ``operand (operator operand)*`` with the
repetition pulled out into its own named rule, so every node in the parse tree
carries the name of the rule that produced it.
"""

from parsimonious.grammar import Grammar

CALC_GRAMMAR = Grammar(r"""
    calculation       = _ expression _

    expression        = term sum_tail
    sum_tail          = sum_step*
    sum_step          = _ additive_op _ term

    term              = factor product_tail
    product_tail      = product_step*
    product_step      = _ multiplicative_op _ factor

    factor            = function_call / unary / number / paren_expr
    unary             = sign _ factor
    function_call     = function_name _ paren_expr
    paren_expr        = lparen _ expression _ rparen

    additive_op       = plus / minus
    multiplicative_op = multiply / divide
    sign              = plus / minus

    plus              = "+"
    minus             = "-"
    multiply          = "*"
    divide            = "/"
    lparen            = "("
    rparen            = ")"

    function_name     = ~r"[A-Za-z]+"
    number            = ~r"[.]?[0-9][0-9.]*"
    _                 = ~r"\s*"
""")
