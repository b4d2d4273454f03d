"""
Array control-path manager for backend-specific dispatch.

This module defines the shared control-path manager used to register and
resolve backend-specific implementations of Array methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"backend"``. Method dispatch is
therefore performed on the runtime value of ``self.backend``.

Typical usage
-------------
Backend-specific kernels register themselves with this manager:

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("numpy"))
    def op_numpy(self, ...): ...

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("python"))
    def op_python(self, ...): ...

At runtime, calling ``Array.op(...)`` dispatches to the implementation whose
registered backend equals ``self.backend``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Array methods based on `self.backend`
array_control_path_manager = create_path_builder("backend")
