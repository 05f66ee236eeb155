"""Input renderers, one per input type category."""

from ninja_forms.inputs.base import Input
from ninja_forms.inputs.block import BlockInput
from ninja_forms.inputs.boolean import BooleanInput
from ninja_forms.inputs.collection import CollectionInput
from ninja_forms.inputs.date_time import DateTimeInput
from ninja_forms.inputs.hidden import HiddenInput
from ninja_forms.inputs.mapping import MappingInput
from ninja_forms.inputs.numeric import NumericInput
from ninja_forms.inputs.priority import PriorityInput
from ninja_forms.inputs.string import StringInput

__all__ = [
    "BlockInput",
    "BooleanInput",
    "CollectionInput",
    "DateTimeInput",
    "HiddenInput",
    "Input",
    "MappingInput",
    "NumericInput",
    "PriorityInput",
    "StringInput",
]
