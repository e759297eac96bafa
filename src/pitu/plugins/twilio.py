"""Twilio plugin rendering bot messages as a TwiML document.

Twilio webhooks for SMS and WhatsApp expect a ``<Response>`` document with
one ``<Message>`` per outgoing text. The plugin runs the rest of the chain
and replaces the response messages with that single document.
"""

from typing import Any

from twilio.twiml.messaging_response import MessagingResponse

from pitu.core.types import FlowResponse
from pitu.plugins.base import NextFn, Plugin


def render_twiml(messages: list[str]) -> str:
    """Serialize messages into a TwiML messaging response."""
    twiml = MessagingResponse()
    for message in messages:
        twiml.message(message)
    return str(twiml)


def twilio_plugin() -> Plugin:
    """Create a plugin that converts outgoing messages to TwiML.

    Example:
        bot = Bot(BotConfig(default_start_node="main.welcome", plugins=[twilio_plugin()]))
        # ["Hello!"] becomes
        # ['<?xml version="1.0" encoding="UTF-8"?><Response><Message>Hello!</Message></Response>']
    """

    async def intercept(context: Any, next: NextFn) -> FlowResponse:
        result = await next()
        result.messages = [render_twiml(result.messages)]
        return result

    return Plugin(intercept=intercept, name="twilio")
