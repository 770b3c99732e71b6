"""
Signals that the host forum sends at the points where discussions get prefixes.

The prefixes app connects its receivers to these in AppConfig.ready(). The host
sends them with ``send()`` and uses the returned values, e.g.::

    responses = before_body_input.send(sender=PostView, user=request.user, form=form)
    extra_html = "".join(str(html) for _receiver, html in responses)

before_body_input
    The discussion authoring form is about to render its body input.
    Arguments: ``user``, ``form`` (optional, the host form), ``value``
    (optional, the current prefix, used when the form has no prefix field),
    ``context`` (optional mutable mapping; its ``media`` gets the stylesheet).
    Returns the HTML of the prefix selection control.

before_discussion_render
    A discussion detail view is about to render.
    Arguments: ``user``, ``context`` (a mutable mapping with a ``discussion``).

before_discussion_name
    A discussion's name is being formatted in a list.
    Arguments: ``user``, ``discussion``. Returns the name to display.

before_save_discussion
    A discussion is about to be saved from submitted values.
    Arguments: ``form_post_values`` (a mutable dict, changed in place).

before_list_render
    A discussions or categories list is about to render.
    Arguments: ``context`` (a mutable mapping).
"""
from django.dispatch import Signal

before_body_input = Signal()
before_discussion_render = Signal()
before_discussion_name = Signal()
before_save_discussion = Signal()
before_list_render = Signal()
