"""Tests for form_for."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.builder import FormBuilder
from ninja_forms.config import FormsConfig
from ninja_forms.helpers import form_for
from ninja_forms.providers.sql import SQLAlchemyProvider


class TestFormFor:
    def test_new_record(self, session, user):
        html = form_for(user, lambda f: f.input("name"), url="/users", provider=SQLAlchemyProvider(session))
        assert html.startswith(
            '<form class="simple_form user" id="new_user" novalidate="novalidate" action="/users" method="post">'
        )
        assert 'name="user[name]"' in html
        assert html.endswith("</form>")

    def test_persisted_record(self, session, user):
        session.add(user)
        session.flush()
        html = form_for(user, lambda f: f.button("submit"), provider=SQLAlchemyProvider(session))
        assert f'id="edit_user_{user.id}"' in html
        assert 'value="Update User"' in html

    def test_block_receives_builder(self, user):
        seen = []
        form_for(user, lambda f: seen.append(f) or "")
        assert isinstance(seen[0], FormBuilder)
        assert seen[0].object_name == "user"

    def test_block_output_joined(self, session, user):
        def body(f):
            return f.error_notification() + f.input("name") + f.button("submit")

        html = form_for(user, body, provider=SQLAlchemyProvider(session))
        assert html.index('name="user[name]"') < html.index('type="submit"')

    def test_plain_string_block_is_escaped(self, user):
        assert "&lt;script&gt;" in form_for(user, lambda f: "<script>")

    def test_object_name(self, user):
        html = form_for(user, lambda f: f.input("name"), object_name="account")
        assert 'class="simple_form account"' in html
        assert 'id="new_account"' in html
        assert 'name="account[name]"' in html

    def test_method_tunnel(self, user):
        html = form_for(user, lambda f: Markup("<input>"), method="PATCH")
        assert 'method="post"' in html
        assert '<input type="hidden" name="_method" value="patch">\n<input>' in html

    def test_get(self, user):
        html = form_for(user, lambda f: "", method="get")
        assert 'method="get"' in html
        assert "_method" not in html

    def test_html_options(self, user):
        html = form_for(user, lambda f: "", html={"class": "wide", "id": "signup", "novalidate": False})
        assert 'class="simple_form user wide"' in html
        assert 'id="signup"' in html
        assert "novalidate" not in html

    def test_custom_builder_class(self, user):
        class ShoutingFormBuilder(FormBuilder):
            pass

        seen = []
        form_for(user, lambda f: seen.append(f) or "", builder_class=ShoutingFormBuilder)
        assert type(seen[0]) is ShoutingFormBuilder

    def test_form_class_from_config(self, user):
        html = form_for(user, lambda f: "", config=FormsConfig(form_class="form-horizontal"))
        assert 'class="form-horizontal user"' in html

    def test_without_object(self):
        html = form_for(None, lambda f: f.input("q", label=False, wrapper=False), object_name="search", method="get")
        assert html.startswith('<form class="simple_form search" id="new_search" novalidate="novalidate" method="get">')
        assert 'name="search[q]"' in html
