from .algorders.algebra import Algebra, group_algebra, matrix_algebra, number_field_algebra, quaternion_algebra
from .algorders.conductor import conductor
from .algorders.errors import InvalidGenerators, NonIntegralInclusion, PreconditionViolation
from .algorders.ideal import OrderIdeal, ring_of_multipliers, trace_dual
from .algorders.maximal_order import any_order, equation_order, is_maximal, maximal_order, MaximalOrder, MaximalOrderCache, nice_order, pmaximal_overorder
from .algorders.modular import maximal_ideals, pradical
from .algorders.order import discriminant, Order, trace_form
from .algorders.schur import representatives_of_maximal_orders, schur_index, schur_index_at_p, schur_index_at_real_place
