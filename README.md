# mermaidgame

An underwater arcade game built on pygame. You steer a mermaid, collect
seashells and flowers for points, and keep away from the killer fish.

## Installing

```
pip install .
```

## Playing

```
mermaidgame
```

The command opens a 1000×600 window titled "Mermaid Game". Click the start
screen to begin. After that:

- **Arrow keys** move the mermaid 40 pixels at a time. A move that would take
  her off the window is ignored. Each frame she reacts to the most recent
  event, so a key press keeps moving her until another event arrives. Frames
  are 200 ms apart.
- **Seashells** give 5 points. **Flowers** give 1 point. Each appears at a
  random place after a random wait of 3 to 13 seconds.
- **Killer fish** come in from the left edge every 3 seconds. Touching one
  removes that fish and costs a life. You start with three lives, shown as
  hearts in the top-right corner. After a hit, further hits are ignored for
  3 seconds.
- Once your score reaches 20, a **sword** can appear. After you pick it up,
  the next killer fish you hit is removed and gives 15 points. That hit costs
  no life.
- **Harmless fish** come in from the right edge every 5 seconds. They do
  nothing to you.

The game shows the winning screen for five seconds and ends once your score
reaches 100. It shows the game-over screen and ends when you have no lives
left. Closing the window ends the game at once.

If the window, the font, the sound, an image or the music cannot be loaded,
the command prints the reason and exits.

### Media files

The package ships no media. The game loads the following files from the
current directory:

- `killerfish.png`
- `fish2.png`
- `seashellnew.png`
- `mermaid.png`
- `lives.png`
- `sword.png`
- `flower.png`
- `underwater.jpg`
- `Game Over.png`
- `WinningScreen.png`
- `VT323-Regular.ttf`
- `Sakura-Girl-Beach-chosic.com_.mp3`

`Game Start.png` is optional. Without it the start screen is left blank.

## Using the pieces

The game rules are separate from the window, so you can run them without a
display.

`mermaidgame.game.World(rng=None, now=0)` holds:

- the mermaid
- the fish
- the collectibles
- the hearts
- the spawn timers

Pass a `random.Random` as `rng` to get repeatable spawns. Times are in
milliseconds.

`World` has these methods:

- `spawn(now)` adds the fish and items that are due.
- `handle_events(events)` leaves the start screen on a mouse click and records
  a quit request. It also remembers the last event.
- `update()` steers the mermaid with the last event and moves the fish.
- `resolve_collisions(now)` applies hits, pickups and scoring.
- `step(now, events)` runs one whole frame. It returns an `Outcome`, which is
  one of `RUNNING`, `QUIT`, `WON` or `LOST`.
- `draw(surface, textures, font)` draws the current scene.

`mermaidgame.game.Game` owns the window, the media and the main loop. It has
`init()`, `load_media()`, `load_texture(path)`, `run()` and `close()`. On
failure these raise `mermaidgame.game.GameError`.

The sprites are in other modules:

- `mermaidgame.fish` has `Fish`, `KillerFish` and `HarmlessFish`.
- `mermaidgame.mermaid` has `Mermaid`, which keeps `lives` and `score`. It
  supports `mermaid += points`.
- `mermaidgame.collectibles` has `Flower`, `Seashell`, `Sword` and `Heart`.

Collision and score messages go to the standard `logging` module.

## What it does not do

The game does not keep high scores or save progress. It has no settings, pause
or restart. To play again, run the command again.

## Tests

```
pip install .[test]
pytest
```