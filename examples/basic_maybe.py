"""
Basic Maybe usage: construction, defaults, raising, iteration.

Run: python examples/basic_maybe.py
"""
import asyncio

from maybepy import empty, present, from_nullable


USERS = {"ada": "Ada Lovelace", "alan": None}


def lookup(name: str):
    # dict.get returns None for unknown names and for null entries alike
    return from_nullable(USERS.get(name))


async def fetch_remote(name: str) -> str:
    await asyncio.sleep(0)
    return f"<remote:{name}>"


async def main():
    print("ada =>", lookup("ada").or_else("anonymous"))        # Ada Lovelace
    print("alan =>", lookup("alan").or_else("anonymous"))      # anonymous

    # fold is the one place both cases are handled
    greeting = lookup("grace").fold(lambda n: f"hello {n}", lambda: "who?")
    print("grace =>", greeting)                                # who?

    # escalate absence into the caller's own exception, built lazily
    try:
        lookup("bob").or_else_raise_with(lambda: KeyError("bob"))
    except KeyError as e:
        print("bob =>", repr(e))

    # zero or one element
    for name in present("single"):
        print("iterated =>", name)
    print("empty list =>", list(empty()))

    print("remote =>", await lookup("linus").or_else_await(lambda: fetch_remote("linus")))


if __name__ == "__main__":
    asyncio.run(main())
