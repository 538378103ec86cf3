# mctgbot

Building blocks for relaying chat between a Minecraft server and a Telegram
group: a small Telegram Bot API client, a polling bot that turns group
messages into events, and the event and error types used on the game-server
side.

The package has no third-party dependencies and needs Python 3.10 or later.

## Modules

- `mctgbot.telegram`: Telegram Bot API types and HTTP helpers.
  - `exchange(endpoint)` sends a GET and returns the body as bytes;
    `exchange_with(endpoint, params)` POSTs `params` as JSON (anything with a
    `to_dict()` method, or a plain dict).
  - `exchange_into(endpoint, parse)` and
    `exchange_into_with(endpoint, params, parse)` decode the reply into an
    `ExchangeResult`, parsing its `result` with `parse`.
  - `ExchangeResult.unwrap()` returns the result or raises `TelegramAPIError`
    (with `error_code` and `description`) when the reply had `"ok": false`.
  - Types: `GetMe`, `User`, `Chat`, `Message`, `Update` (each with
    `from_dict`), `parse_updates(data)`, and the request bodies
    `SendMessage` and `EditMessageText` (each with `to_dict`, which leaves out
    an empty `parse_mode`). `API_BASE` and `PM_MARKDOWN` are the API base URL
    and the MarkdownV2 parse mode.
- `mctgbot.bot`: `BotConfig`, `BotState` and `Bot`.
- `mctgbot.bot_events`: events the bot puts on its outbox
  (`OutputEventMessage`, `OutputEventEditMessage`, `OutputEventCommand`,
  `OutputEventBindUser`, `OutputEventListPlayers`, `OutputEventKillServer`,
  `OutputEventUserError`, `OutputEventRequestError`, `OutputEventAPIError`) and
  the `InputEventSendMessage` it reads from its inbox.
- `mctgbot.server_events`: events to and from a game server (chat, deaths,
  achievements, joins and leaves, player lists, teams, exit codes, commands,
  renames, kill requests) and `ServerError` / `ServerErrorType`.
- `mctgbot.team_mapping`: `Team` and `TeamMapping`.

## The bot

```python
from mctgbot.bot import Bot, BotConfig
from mctgbot.bot_events import InputEventSendMessage

config = BotConfig.from_dict({
    "api_token": "token",
    "chat_id": 42,
    "admin_username": "server_admin",
})

bot = Bot.connect(config)    # calls getMe; raises TelegramAPIError if refused
bot.start()                  # starts the polling and input threads

bot.inbox.put(InputEventSendMessage("Hello from the server"))
event = bot.outbox.get()     # the next event from the group chat

bot.stop()                   # ends both threads and waits for them
```

`Bot(config)` creates a bot without contacting the API. `send_message` and
`edit_message` can also be called directly; they return the sent `Message` and
raise `TelegramAPIError` on an unsuccessful reply.

While running, the bot long-polls `getUpdates`. Request failures are put on
the outbox as `OutputEventRequestError`, unsuccessful replies as
`OutputEventAPIError`. Only messages from the configured chat are handled:

- `/players` gives `OutputEventListPlayers`;
- `/iamthe <minecraft_nickname>` gives `OutputEventBindUser`, or
  `OutputEventUserError` with a usage line if it does not have exactly one
  argument;
- from the user named by `admin_username`, `/kill-server` gives
  `OutputEventKillServer` and any other text starting with `/` gives
  `OutputEventCommand`;
- any other text gives `OutputEventMessage`, and an edited text message gives
  `OutputEventEditMessage`.

`Bot.classify_message(message)` applies these rules to one `Message`, and
`Bot.process_updates(updates, offset)` returns the events for a batch of
updates together with the next update offset.

## Teams

```python
from mctgbot.team_mapping import Team, TeamMapping

mapping = TeamMapping([
    Team("red", ["alice", "bob"]),
    Team("blue", ["carol", "alice"]),
])

mapping.player_teams("alice")   # ['red', 'blue']
mapping.team_players("red")     # ['alice', 'bob']
```

`team_players` returns the sorted, de-duplicated players of every team with
that name.

## What this package does not do

There is no command to run and no configuration file loader. The package does
not start, watch or talk to a Minecraft server: `mctgbot.server_events` only
defines the events and errors such a server handle would use, and nothing here
connects the bot's events to a server. Wiring the bot's outbox and inbox to a
game server is left to the program that uses the package.

## Running the tests

```
pip install ".[test]"
pytest
```