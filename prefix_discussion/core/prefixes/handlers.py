"""
Handlers for the host's discussion hooks.

Each handler is a plain function with explicit inputs and outputs; the
``on_*`` receivers at the bottom only adapt them to the signals in
``signals.py``. Permission denials are not errors here: the handler simply
renders nothing, or leaves the discussion name as it was.
"""
from __future__ import annotations

from typing import Any, MutableMapping

from django import forms
from django.dispatch import receiver
from django.utils.html import format_html

from prefix_discussion.lib.fields import PREFIX_FIELD_NAME

from . import api, signals
from .forms import DiscussionPrefixForm

STYLESHEET = "prefix_discussion/css/prefixdiscussion.css"

prefix_media = forms.Media(css={"all": [STYLESHEET]})


def add_stylesheet(context: MutableMapping[str, Any]) -> None:
    """
    Adds the prefix stylesheet to ``context["media"]``.
    """
    media = context.get("media")
    context["media"] = prefix_media if media is None else media + prefix_media


def prefix_css_class(prefix: str) -> str:
    """
    CSS classes for a prefix label.

    The label is used as-is apart from spaces, so configured labels must be
    safe to use in a class name.
    """
    return "PrefixDiscussion Sp" + prefix.replace(" ", "_")


def render_prefix_label(prefix: str) -> str:
    return format_html('<span class="{}">{}</span>', prefix_css_class(prefix), prefix)


def render_prefix_input(user, form: forms.BaseForm | None = None, value: str | None = None) -> str:
    """
    Renders the prefix select box for the discussion authoring form.

    If the host form declares a prefix field, that bound field is rendered;
    otherwise a stand-alone one is, with ``value`` pre-selected.
    """
    if not user.has_perm("prefix_discussion.add_prefix"):
        return ""

    if form is not None and PREFIX_FIELD_NAME in form.fields:
        bound_field = form[PREFIX_FIELD_NAME]
    else:
        bound_field = DiscussionPrefixForm(initial={PREFIX_FIELD_NAME: value})[PREFIX_FIELD_NAME]
    return format_html(
        '<div class="P PrefixDiscussion">{}{}</div>',
        bound_field.label_tag(),
        bound_field,
    )


def decorate_discussion_name(user, discussion) -> str:
    """
    Returns the discussion name with its prefix label in front.

    Returns the name unchanged if the user can't view prefixes or the
    discussion has none. The unchanged name is plain text that still needs
    escaping (templates autoescape it), while a decorated name is already safe
    HTML, so both render the same way in a template.
    """
    prefix = getattr(discussion, PREFIX_FIELD_NAME, None)
    if not prefix or not user.has_perm("prefix_discussion.view_prefix"):
        return discussion.name
    return format_html("{}{}", render_prefix_label(prefix), discussion.name)


def decorate_discussion_context(user, context: MutableMapping[str, Any]) -> None:
    """
    Puts the decorated title of ``context["discussion"]`` in ``context["discussion_name"]``.
    """
    discussion = context.get("discussion")
    if discussion is None:
        return
    if not getattr(discussion, PREFIX_FIELD_NAME, None):
        return
    if not user.has_perm("prefix_discussion.view_prefix"):
        return
    add_stylesheet(context)
    context["discussion_name"] = decorate_discussion_name(user, discussion)


@receiver(signals.before_body_input)
def on_before_body_input(sender, user, form=None, value=None, context=None, **kwargs):
    html = render_prefix_input(user, form=form, value=value)
    if html and context is not None:
        add_stylesheet(context)
    return html


@receiver(signals.before_discussion_render)
def on_before_discussion_render(sender, user, context, **kwargs):
    decorate_discussion_context(user, context)


@receiver(signals.before_discussion_name)
def on_before_discussion_name(sender, user, discussion, **kwargs):
    return decorate_discussion_name(user, discussion)


@receiver(signals.before_save_discussion)
def on_before_save_discussion(sender, form_post_values, **kwargs):
    api.normalize_form_values(form_post_values)


@receiver(signals.before_list_render)
def on_before_list_render(sender, context, **kwargs):
    add_stylesheet(context)
