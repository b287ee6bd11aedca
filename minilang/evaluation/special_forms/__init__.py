"""Registry of special forms for the minilang evaluator.

Maps keyword leaves to handler functions that implement their evaluation
rules. The evaluator consults this table before function application.
"""

from minilang.types.node import LET, PLUS, PRINT
from minilang.evaluation.special_forms.let_form import let_form
from minilang.evaluation.special_forms.plus_form import plus_form
from minilang.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    PRINT: print_form,
    PLUS: plus_form,
    LET: let_form,
}
