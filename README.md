# moodengine

A small engine that gives a companion robot moods and a personality. Each
thing that happens to the robot (an `Action`, such as being hit on the head
or getting a belly massage) is turned into a `Reaction` according to its
current `Personality` and `Mood`. Every reaction carries a reward; a sliding
window over recent rewards decides the next mood, and a simple moving average
over recent moods decides the personality.

The package also holds a few pieces that sit around the engine: a touch
sensor with hold detection, a plain-text user store, a mailbox and framing
helpers for short peer-to-peer text messages, and a client that asks a
generative-language service short questions.

## Installing

```
pip install moodengine
```

For running the tests:

```
pip install "moodengine[test]"
pytest
```

## The engine

```python
from moodengine.config import Action, Mood, Personality, action_name, mood_name
from moodengine.generator import ReactGenerator
from moodengine.reactions import reaction_name

robot = ReactGenerator()

reaction = robot.get_reaction(Personality.BALANCED, Mood.POSITIVE, Action.HEAD_MASSAGE)
print(action_name(Action.HEAD_MASSAGE), "->", reaction_name(reaction))
robot.add_reaction_log(reaction)

robot.slide_window(robot.reward_logs, robot.frame_size, robot.window_size)
mood = robot.predict_mood()
robot.add_mood_log(mood)
print(mood_name(mood))

print(robot.format_reaction_logs())
print(robot.format_reward_logs())
print(robot.format_mood_logs())
print(robot.predict_personality())
```

`ReactGenerator` starts as a balanced character in a positive mood, with its
tables loaded from the built-in data.

- `get_reaction(personality, mood, action)` looks the reaction up in its
  `ReactionTable` and appends the matching reward from its `RewardTable` to
  `reward_logs`. `set_reaction` changes one entry of the table.
- `add_reaction_log` keeps the last `window_size` reactions (default 4);
  `add_mood_log` keeps the last `frame_size` moods (default 20). Setting
  `frame_size` also sets the frame of the moving average. `add_reward_log`
  appends to the reward log without a limit.
- `slide_window(values, frame_size, window_size)` sets
  `character.mood_changed` and, once `values` is longer than the window,
  recomputes `character.mood_positivity` and `character.mood_negativity`
  from the last `window_size` values, dropping the oldest value in place when
  the list is longer than `frame_size`.
- `predict_mood()` keeps the current mood until `window_size` reactions have
  been logged; after that it chooses positive when the positivity margin
  exceeds `positive_threshold` (0.0 by default), negative when the margin is
  below zero, and neutral otherwise.
- `predict_personality()` classifies the mood log with an `SMA`.
- `mood_details()` returns positivity and negativity as percentages.
- `format_reaction_logs()`, `format_reward_logs()` and `format_mood_logs()`
  render each log as one line of text.
- `set_reward_multiplier(achiever, balanced, creative, distressed)` stores a
  multiplier per personality in `reward_multiplier`; the rewards logged by
  `get_reaction` do not use it.

### Names and enumerations

`moodengine.config` holds the enumerations (`Personality`, `Mood`, `Action`,
`Reaction`, `LoadFrom`, `Task`, `MentalState`, `Inertia`), the
`CharacterState` dataclass, and `action_name`, `mood_name` and
`personality_name`. `moodengine.reactions.reaction_name` gives a reaction's
display name.

### Tables

- `ReactionTable` maps personality, mood and action to a reaction. `load`
  fills it with the built-in reactions, whatever `LoadFrom` source is given;
  `lookup` reads an entry (raising `KeyError` when it is not set) and `set`
  changes one.
- `RewardTable.load` fills the table only for `LoadFrom.FLASH`; other sources
  leave it empty. `reward(personality, reaction)` gives the score and raises
  `KeyError` when nothing is loaded.
- `moodengine.personality.SMA.predict_personality(mood_logs)` classifies a
  list of moods into achiever, creative, balanced or distressed from which
  moods hold more than a third of the last `frame_size` entries;
  `SMA.moving_averages` returns the positive, negative and neutral shares.

## Around the engine

- `moodengine.touch.TouchSensor(read, hold_time_ms=2000, clock=...)` takes a
  function that returns the input level. `is_touched()` reads it;
  `is_touch_held()` is true once a touch has lasted the hold time.
- `moodengine.users.UserStore(path)` works on a text file with one
  `id|name|role` line per `User`: `find(user_id)` returns the first match or
  raises `KeyError`, and `add(user)` appends a line, creating the file.
- `moodengine.link`: `encode` turns text into UTF-8 bytes and raises
  `ValueError` above 200 bytes, `decode` turns bytes back into text,
  `parse_bssid` reads a colon-separated hardware address such as
  `"02:00:00:00:00:01"` into six bytes, and a `Mailbox` holds the last
  message delivered (`deliver`, `available`, `receive`).
- `moodengine.gemini.GeminiClient`: `build_payload(question)` makes the JSON
  request body and `ask(question)` posts it and returns the answer, in which
  every character that is not an ASCII letter, digit or whitespace is
  replaced by blanks (see `filter_answer`). A failed request or a reply
  without an answer raises `GeminiError`. A custom `transport` function can
  be passed in place of the built-in HTTP one.

```python
from moodengine.gemini import GeminiClient

password = "password"
client = GeminiClient(ssid="robot-net", password=password, token="token", max_tokens=300)
print(client.ask("What is a moving average?"))
```

The `ssid` and `password` are stored on the client but not used; network
access is whatever the host machine already has.

## What the package does not do

It has no command-line program and runs no robot on its own: it does not
read hardware pins, drive a display, play animations or sound, detect a
wake word or recognise faces. The touch sensor only reads the function it
is given, the user store only reads and writes its text file, and the link
module only frames messages and holds what is delivered to it; sending them
over a radio or network is left to the caller.