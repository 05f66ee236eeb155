"""Tests for the individual input renderers."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from enum import Enum

from conftest import Upload

from ninja_forms.builder import FormBuilder
from ninja_forms.config import FormsConfig
from ninja_forms.i18n import DictTranslator
from ninja_forms.inputs.base import to_sentence
from ninja_forms.inputs.priority import country_names, time_zone_names
from ninja_forms.providers.sql import SQLAlchemyProvider


class Role(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"


class Option:
    def __init__(self, id, title):
        self.id = id
        self.title = title


class TestStringInput:
    def test_email(self, builder):
        html = builder.input("email")
        assert 'type="email" name="user[email]"' in html
        assert 'size="50" maxlength="255"' in html

    def test_short_limit_sets_size(self, article_builder):
        html = FormBuilder("article", article_builder.object, config=FormsConfig(default_input_size=100)).input("title")
        assert 'size="80" maxlength="80"' in html

    def test_tel_and_url(self):
        builder = FormBuilder("contact")
        assert 'type="tel"' in builder.input("phone")
        assert 'type="url"' in builder.input("website_url")

    def test_search(self):
        assert 'type="search"' in FormBuilder("filter").input("q", as_="search")

    def test_input_html_size_wins(self, builder):
        assert 'size="20"' in builder.input("name", input_html={"size": 20})


class TestNumericInput:
    def test_integer(self, builder):
        html = builder.input("age")
        assert 'type="number" name="user[age]" id="user_age" value="30" class="integer required" step="1"' in html

    def test_decimal(self, builder):
        assert 'step="any"' in builder.input("credit_limit")

    def test_float_via_as(self):
        assert 'step="any"' in FormBuilder("item").input("weight", as_="float")

    def test_custom_step(self, builder):
        assert 'step="5"' in builder.input("age", input_html={"step": 5})

    def test_placeholder(self, builder):
        assert 'placeholder="18"' in builder.input("age", placeholder="18")


class TestMappingInput:
    def test_password_has_no_value(self, builder, user):
        user.password = "secret"
        html = builder.input("password")
        assert 'type="password" name="user[password]" id="user_password" class="password required"' in html
        assert "secret" not in html

    def test_text_area(self, builder):
        html = builder.input("description")
        assert '<textarea name="user[description]" id="user_description" class="text required">Hello</textarea>' in html

    def test_text_area_placeholder(self, builder):
        assert 'placeholder="Say something"' in builder.input("description", placeholder="Say something")

    def test_file(self, article):
        article.attachment = Upload()
        html = FormBuilder("article", article).input("attachment")
        assert '<div class="input file required">' in html
        assert 'type="file" name="article[attachment]" id="article_attachment" class="file required"' in html
        assert "value=" not in html


class TestDateTimeInput:
    def test_date(self, builder, user):
        user.born_on = date(1990, 5, 17)
        assert 'type="date" name="user[born_on]" id="user_born_on" value="1990-05-17"' in builder.input("born_on")

    def test_datetime(self, builder, user):
        user.updated_at = datetime(2024, 1, 2, 3, 4, 5)
        assert 'type="datetime-local" name="user[updated_at]"' in builder.input("updated_at")
        assert 'value="2024-01-02T03:04"' in builder.input("updated_at")

    def test_timestamp(self, builder, user):
        user.created_at = datetime(2024, 1, 2, 3, 4)
        html = builder.input("created_at")
        assert '<div class="input datetime required">' in html
        assert 'value="2024-01-02T03:04"' in html

    def test_time(self):
        record = {"opens_at": time(9, 30)}
        html = FormBuilder("shop", record).input("opens_at", as_="time")
        assert 'type="time" name="shop[opens_at]" id="shop_opens_at" value="09:30"' in html

    def test_date_from_datetime(self, builder, user):
        user.born_on = datetime(1990, 5, 17, 12, 0)
        assert 'value="1990-05-17"' in builder.input("born_on")

    def test_empty(self, builder):
        assert "value=" not in builder.input("born_on")


class TestBooleanInput:
    def test_unchecked(self, builder):
        html = builder.input("active")
        assert '<div class="input boolean required">' in html
        assert '<input name="user[active]" type="hidden" value="0">' in html
        assert '<input type="checkbox" name="user[active]" id="user_active" value="1" class="boolean required">' in html

    def test_checked(self, builder, user):
        user.active = True
        assert 'value="1" checked="checked"' in builder.input("active")

    def test_hidden_precedes_checkbox(self, builder):
        html = builder.input("active")
        assert html.index('type="hidden"') < html.index('type="checkbox"')


class TestCollectionInput:
    def test_strings(self):
        html = FormBuilder("user").input("role", collection=["admin", "editor"])
        assert '<select name="user[role]" id="user_role" class="select required">' in html
        assert '<option value="admin">admin</option>' in html
        assert '<option value="">' in html

    def test_pairs(self):
        html = FormBuilder("user", {"role": "e"}).input("role", collection=[("Admin", "a"), ("Editor", "e")])
        assert '<option value="a">Admin</option>' in html
        assert '<option value="e" selected="selected">Editor</option>' in html

    def test_mapping_uses_keys_as_labels(self):
        html = FormBuilder("user", {"role": "editor"}).input(
            "role", collection={"Administrator": "admin", "Editor": "editor"}
        )
        assert '<option value="admin">Administrator</option>' in html
        assert '<option value="editor" selected="selected">Editor</option>' in html
        assert 'value="Administrator"' not in html

    def test_mapping_as_radio(self):
        html = FormBuilder("user").input("role", as_="radio", collection={"Administrator": "admin"})
        assert 'value="admin"' in html
        assert 'value="Administrator"' not in html

    def test_enums(self):
        html = FormBuilder("user", {"role": Role.EDITOR}).input("role", collection=list(Role))
        assert '<option value="editor" selected="selected">editor</option>' in html

    def test_objects_use_configured_methods(self):
        html = FormBuilder("post").input("option_id", collection=[Option(1, "First"), Option(2, "Second")])
        assert '<option value="1">First</option>' in html

    def test_explicit_methods(self):
        options = [Option(1, "First")]
        html = FormBuilder("post").input("option_id", collection=options, label_method="id", value_method="title")
        assert '<option value="First">1</option>' in html

    def test_configured_label_methods(self):
        config = FormsConfig(collection_label_methods=["code"], collection_value_methods=["code"])

        class Currency:
            code = "EUR"

        html = FormBuilder("price", config=config).input("currency", collection=[Currency()])
        assert '<option value="EUR">EUR</option>' in html

    def test_prompt_replaces_blank(self):
        html = FormBuilder("user").input("role", collection=["a"], prompt=True)
        assert '<option value="">Please select</option>' in html

    def test_prompt_text(self):
        html = FormBuilder("user").input("role", collection=["a"], prompt="Choose a role")
        assert '<option value="">Choose a role</option>' in html

    def test_include_blank_false(self):
        html = FormBuilder("user").input("role", collection=["a"], include_blank=False)
        assert '<option value="">' not in html

    def test_include_blank_text(self):
        html = FormBuilder("user").input("role", collection=["a"], include_blank="None")
        assert '<option value="">None</option>' in html

    def test_multiple_has_no_blank(self):
        html = FormBuilder("user").input("roles", collection=["a"], input_html={"multiple": True})
        assert '<option value="">' not in html
        assert 'name="user[roles][]"' in html

    def test_boolean_default_collection(self, builder, user):
        user.active = True
        html = builder.input("active", as_="radio")
        assert '<div class="input radio required">' in html
        assert 'type="radio" name="user[active]" id="user_active_true" value="true" checked="checked"' in html
        assert '<label for="user_active_false" class="collection_radio">No</label>' in html

    def test_translated_yes_no(self, session, user):
        translator = DictTranslator({"simple_form": {"yes": "Sim", "no": "Não"}})
        builder = FormBuilder("user", user, provider=SQLAlchemyProvider(session), translator=translator)
        html = builder.input("active", as_="radio")
        assert ">Sim</label>" in html
        assert ">Não</label>" in html

    def test_check_boxes(self):
        html = FormBuilder("user", {"roles": ["a"]}).input("roles", as_="check_boxes", collection=["a", "b"])
        assert 'type="checkbox" name="user[roles][]" id="user_roles_a" value="a" checked="checked"' in html
        assert 'id="user_roles_b" value="b" class="check_boxes required">' in html
        assert html.count('<input name="user[roles][]" type="hidden" value="">') == 1

    def test_radio_ids_are_sanitized(self):
        html = FormBuilder("user").input("city", as_="radio", collection=["New York"])
        assert 'id="user_city_new_york"' in html
        assert '<label for="user_city_new_york" class="collection_radio">New York</label>' in html


class TestPriorityInput:
    def test_country_from_name(self):
        html = FormBuilder("address").input("country")
        assert '<div class="input country required">' in html
        assert '<option value="Brazil">Brazil</option>' in html

    def test_priority_first(self):
        html = FormBuilder("address").input("country", priority=["Portugal", "Brazil"])
        separator = '<option value="" disabled="disabled">-------------</option>'
        assert separator in html
        assert html.index(">Brazil<") < html.index(separator)
        assert html.index(">Portugal<") < html.index(separator)
        assert html.index(separator) < html.index(">Afghanistan<")
        assert html.count(">Brazil<") == 1

    def test_priority_from_config(self):
        config = FormsConfig(country_priority=["United States"])
        html = FormBuilder("address", config=config).input("country")
        assert html.index(">United States<") < html.index("-------------")

    def test_no_priority_no_separator(self):
        assert "-------------" not in FormBuilder("address").input("country")

    def test_time_zone_collection(self):
        html = FormBuilder("user", {"time_zone": "Europe/Lisbon"}).input(
            "time_zone", collection=["UTC", "Europe/Lisbon"], priority=["Europe/Lisbon"]
        )
        assert '<div class="input time_zone required">' in html
        assert '<option value="Europe/Lisbon" selected="selected">Europe/Lisbon</option>' in html
        assert html.index("Europe/Lisbon") < html.index("-------------") < html.index(">UTC<")

    def test_unknown_priority_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ninja_forms.inputs.priority"):
            html = FormBuilder("address").input("country", priority=["Atlantis"])
        assert "Atlantis" in caplog.text
        assert "Atlantis" not in html

    def test_bundled_lists(self):
        names = country_names()
        assert names == tuple(sorted(names))
        assert "Portugal" in names
        assert isinstance(time_zone_names(), tuple)


class TestHiddenInput:
    def test_renders_only_the_field(self):
        html = FormBuilder("user", {"token": "abc"}).input("token", as_="hidden")
        assert html == '<input type="hidden" name="user[token]" id="user_token" value="abc" class="hidden">'

    def test_input_html_class(self):
        html = FormBuilder("user", {"token": "abc"}).input("token", as_="hidden", input_html={"class": "js"})
        assert 'class="hidden js"' in html


class TestToSentence:
    def test_forms(self):
        assert to_sentence([]) == ""
        assert to_sentence(["a"]) == "a"
        assert to_sentence(["a", "b"]) == "a and b"
        assert to_sentence(["a", "b", "c"]) == "a, b, and c"
