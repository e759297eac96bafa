"""Integration tests driving the booking example bot turn by turn."""

import pytest

from examples.booking.bot import bot
from pitu.core.types import FlowResponse


@pytest.mark.asyncio
async def test_full_booking_conversation():
    """
    GIVEN the booking example bot
    WHEN a user starts, books a service and confirms
    THEN every turn returns the node to resume from and the last one ends the chat
    """
    context: dict = {}

    start = await bot.run(context=context)
    assert start.next == "main.welcome"
    assert start.messages[0].startswith("Welcome!")

    service = await bot.run(context=context, node=start.next, message="book")
    assert service == FlowResponse(
        messages=["Which service would you like to book?"], next="booking.service", done=False
    )

    confirm = await bot.run(context=context, node=service.next, message="massage")
    assert confirm.messages == ["Book massage? (yes/no)"]
    assert confirm.next == "booking.confirm"

    done = await bot.run(context=context, node=confirm.next, message="yes")
    assert done == FlowResponse(messages=["Booked massage.", "See you later!"], next=None, done=True)
    assert context == {"service": "massage"}


@pytest.mark.asyncio
async def test_unrecognized_input_stays_on_node():
    response = await bot.run(context={}, node="main.welcome", message="what?")

    assert response == FlowResponse(
        messages=["Sorry, I didn't understand that."], next="main.welcome", done=False
    )


@pytest.mark.asyncio
async def test_declining_returns_to_welcome():
    context = {"service": "massage"}

    response = await bot.run(context=context, node="booking.confirm", message="no")

    assert response.next == "main.welcome"
    assert response.messages[0].startswith("Welcome!")
