"""
Tests for gridkit.template_engine module
"""

import pytest
from jinja2 import UndefinedError

from gridkit.template_engine import TemplateEngine, get_template_engine, render_template


class TestTemplateEngine:
    """Test template loading and rendering"""

    def test_default_template_dir(self):
        """Test the packaged templates directory is used by default"""
        engine = TemplateEngine()
        assert engine.template_dir.name == "templates"
        assert (engine.template_dir / "breakpoints.css").exists()

    def test_render_packaged_template(self):
        """Test rendering the breakpoint stylesheet"""
        css = render_template("breakpoints.css", meta_class="gridkit-mq", serialized="small=0em")
        assert 'font-family: "small=0em";' in css

    def test_missing_variable_fails(self):
        """Test undefined variables raise instead of rendering empty"""
        with pytest.raises(UndefinedError):
            render_template("breakpoints.css", meta_class="gridkit-mq")

    def test_custom_template_dir(self, tmp_path):
        """Test rendering from a custom directory"""
        (tmp_path / "rule.css").write_text(".{{ name }} { width: {{ width }}; }")
        engine = TemplateEngine(tmp_path)
        assert engine.render("rule.css", name="cell", width="50%") == ".cell { width: 50%; }"

    def test_css_is_not_html_escaped(self, tmp_path):
        """Test CSS templates keep quotes and ampersands"""
        (tmp_path / "quote.css").write_text('content: "{{ value }}";')
        engine = TemplateEngine(tmp_path)
        assert engine.render("quote.css", value="a&b") == 'content: "a&b";'

    def test_singleton(self):
        """Test get_template_engine returns the same instance"""
        assert get_template_engine() is get_template_engine()
