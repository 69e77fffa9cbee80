from .algebra import Algebra, AlgebraElement, group_algebra, GroupAlgebra, MatrixAlgebra, matrix_algebra, number_field_algebra, quaternion_algebra
from .conductor import conductor
from .errors import InvalidGenerators, NonIntegralInclusion, PreconditionViolation
from .ideal import OrderIdeal, ring_of_multipliers, scalar_ideal, trace_dual
from .maximal_order import any_order, equation_order, is_maximal, maximal_order, MaximalOrder, MaximalOrderCache, nice_order, pmaximal_method, pmaximal_overorder
from .modular import maximal_ideals, pradical
from .order import discriminant, Order, OrderElement, sum_of_local_orders, trace_form
from .schur import representatives_of_maximal_orders, schur_index, schur_index_at_p, schur_index_at_real_place, trace_signature
