"""Booking example bot.

Run with:
    pitu chat examples.booking.bot:bot --config examples/booking/pitu.yaml
"""

from pathlib import Path
from typing import Any

from pitu import Bot, OnEnterArgs, OnReceiveArgs, logging_plugin
from pitu.config import ConfigLoader

settings = ConfigLoader.load(Path(__file__).with_name("pitu.yaml"))
bot: Bot[dict[str, Any]] = Bot(settings.bot.to_bot_config(plugins=[logging_plugin()]))


def build_main(flow):
    def welcome(args: OnEnterArgs) -> None:
        args.send("Welcome! Type 'book' to make a booking or 'bye' to leave.")

    def route(args: OnReceiveArgs) -> None:
        text = args.message.strip().lower()
        if text == "book":
            args.transition("booking.service")
        elif text == "bye":
            args.transition("bye")
        else:
            args.send("Sorry, I didn't understand that.")

    flow.node("welcome", {"on_enter": welcome, "on_receive": route})
    flow.node("bye", {"end": True, "on_enter": lambda args: args.send("See you later!")})


def build_booking(flow):
    async def ask_service(args: OnEnterArgs) -> None:
        args.send("Which service would you like to book?")

    async def store_service(args: OnReceiveArgs) -> None:
        args.context["service"] = args.message.strip()
        args.transition("confirm")

    def ask_confirmation(args: OnEnterArgs) -> None:
        args.send(f"Book {args.context['service']}? (yes/no)")

    def confirm(args: OnReceiveArgs) -> None:
        if args.message.strip().lower() in ("yes", "y"):
            args.send(f"Booked {args.context['service']}.")
            args.transition("main.bye")
        else:
            args.transition("main.welcome")

    flow.node("service", {"on_enter": ask_service, "on_receive": store_service})
    flow.node("confirm", {"on_enter": ask_confirmation, "on_receive": confirm})


bot.flow("main", build_main)
bot.flow("booking", build_booking)
