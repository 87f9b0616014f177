import pytest


def printed_lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


@pytest.mark.asyncio
async def test_synchronous_steps_run_in_order(code_block, capsys):
    await code_block(1).main()

    assert printed_lines(capsys) == ["Plant corn", "Water plant", "Add fertilizer"]


@pytest.mark.asyncio
async def test_timer_callback_runs_after_the_following_statements(code_block, capsys, monkeypatch):
    monkeypatch.setenv("ASYNC_NOTES_WATERING_DELAY_SECONDS", "0.01")

    await code_block(2).main()

    lines = printed_lines(capsys)
    assert lines[:3] == ["Plant maize", "Add fertilizer", "Water plant"]
    assert lines[3].startswith("elapsed time: ")


def test_callbacks(code_block, capsys):
    block = code_block(3)

    assert block.kind_of(["man", "woman", "child"]) == ["man kind", "woman kind", "child kind"]
    block.introduction("Chris", "Nwamba", block.greeting)
    assert printed_lines(capsys) == ["Hello Chris Nwamba, welcome to Scotch!"]


@pytest.mark.asyncio
async def test_interval_callback_fires_requested_times(code_block, capsys):
    await code_block(3).say_hello(times=3, interval_in_seconds=0)

    assert printed_lines(capsys) == ["hello!"] * 3


@pytest.mark.asyncio
async def test_callback_hell_collects_every_step(code_block, capsys):
    await code_block(4).main()

    assert printed_lines(capsys) == [
        "done",
        "['John Doe', '12 Home Lane', '1 Office Park', '555-0100', 'Jane Doe']",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "weather, expected",
    [
        (
            "true",
            [
                "promise resolved successfully",
                "We are going on a date!",
                "name='Cubana Restaurant' location='55th Street' table=5",
            ],
        ),
        ("false", ["promise FAILED", "Bad weather, so no Date"]),
    ],
)
async def test_promise_handlers(code_block, capsys, monkeypatch, weather, expected):
    monkeypatch.setenv("ASYNC_NOTES_WEATHER", weather)

    await code_block(5).main()

    assert printed_lines(capsys) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("block_number", [6, 7])
async def test_chained_ride_request(code_block, capsys, block_number):
    await code_block(block_number).my_date(weather=True)

    assert printed_lines(capsys) == ["Get me an Uber ASAP to 55th Street, we are going on a date!"]


@pytest.mark.asyncio
@pytest.mark.parametrize("block_number", [6, 7])
async def test_bad_weather_skips_ride_request(code_block, capsys, monkeypatch, block_number):
    block = code_block(block_number)
    calls = []

    def spy(details):
        calls.append(details)
        raise AssertionError("order_uber must not run")

    monkeypatch.setattr(block, "order_uber", spy)

    await block.my_date(weather=False)

    assert calls == []
    assert printed_lines(capsys) == ["Bad weather, so no Date"]


@pytest.mark.asyncio
async def test_async_function_matches_explicit_future(code_block, capsys):
    block = code_block(7)

    assert await block.my_ride() == await block.your_ride() == "2017 Dodge Charger"
    for rejected in (block.foo(), block.bar()):
        with pytest.raises(ValueError):
            await rejected

    await block.main()
    assert printed_lines(capsys) == [
        "2017 Dodge Charger 2017 Dodge Charger",
        "ValueError(25)",
        "ValueError(25)",
        "Get me an Uber ASAP to 55th Street, we are going on a date!",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "weather, expected",
    [
        (
            "true",
            [
                "done scheduling",
                "table 5 is booked",
                "Get me an Uber ASAP to 55th Street, we are going on a date!",
            ],
        ),
        ("false", ["done scheduling", "Bad weather, so no Date"]),
    ],
)
async def test_handlers_never_run_before_done_scheduling(code_block, capsys, monkeypatch, weather, expected):
    monkeypatch.setenv("ASYNC_NOTES_WEATHER", weather)

    await code_block(8).main()

    assert printed_lines(capsys) == expected
