"""Registry of special forms for the Arbor evaluator.

Maps expression node types to handler functions that implement their
evaluation rules. The evaluator handles literals, identifiers and application
itself and consults this table for everything else.
"""

from arbor.types.expression import Assignment, Block, Cond, Lambda, Let
from arbor.evaluation.special_forms.block_form import block_form
from arbor.evaluation.special_forms.cond_form import cond_form
from arbor.evaluation.special_forms.lambda_form import lambda_form
from arbor.evaluation.special_forms.let_form import let_form
from arbor.evaluation.special_forms.assignment_form import assignment_form

SPECIAL_FORMS = {
    Block: block_form,
    Cond: cond_form,
    Lambda: lambda_form,
    Let: let_form,
    Assignment: assignment_form,
}
