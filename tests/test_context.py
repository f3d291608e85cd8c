import pytest
from runtime_template_switch.context import BlockContext, RenderContext, StringOutput
from runtime_template_switch.switch import DefaultHelper
from runtime_template_switch.values import UNDEFINED

class TestRenderContext:
    def test_scoped_block_pops_on_error(self):
        rc = RenderContext()
        with pytest.raises(ValueError):
            with rc.scoped_block(BlockContext()):
                assert rc.depth == 1
                raise ValueError("fail")
        assert rc.depth == 0
        assert rc.block() is None

    def test_find_block_is_innermost(self):
        rc = RenderContext()
        outer, middle, inner = BlockContext(), BlockContext(), BlockContext()
        outer.set_local_var("match", True)
        inner.set_local_var("match", False)
        for block in (outer, middle, inner):
            rc.push_block(block)

        assert rc.find_block("match") is inner
        rc.pop_block()
        assert rc.find_block("match") is outer
        assert rc.find_block("other") is None

    def test_local_helper_shadowing(self):
        rc = RenderContext()
        outer_default, inner_default = DefaultHelper(), DefaultHelper()
        with rc.scoped_block(BlockContext()):
            rc.register_local_helper("default", outer_default)
            with rc.scoped_block(BlockContext()):
                rc.register_local_helper("default", inner_default)
                assert rc.get_local_helper("default") is inner_default
            assert rc.get_local_helper("default") is outer_default
        assert rc.get_local_helper("default") is None

    def test_register_outside_block(self):
        with pytest.raises(RuntimeError):
            RenderContext().register_local_helper("case", DefaultHelper())

    def test_local_var_reads_innermost_only(self):
        rc = RenderContext()
        assert rc.get_local_var("match") is UNDEFINED
        outer = BlockContext()
        outer.set_local_var("match", True)
        rc.push_block(outer)
        rc.push_block(BlockContext())
        assert rc.get_local_var("match") is UNDEFINED

class TestStringOutput:
    def test_collects_writes(self):
        out = StringOutput()
        out.write("a")
        out.write("")
        out.write("b")
        assert out.into_string() == "ab"
