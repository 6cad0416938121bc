# tunedeck

A small desktop music player. It opens a 1280×800 window titled
"Music Player" with Play, Pause and Stop buttons, a volume slider and a
progress bar. Pressing Play plays `media/example.mp3`, relative to the
current directory, through pygame's mixer.

## Installing

    pip install .

## Running

    tunedeck

The command takes no options besides `--help`.

- **Play** loads the track and plays it from the start. Pressing it again
  starts the track over.
- **Pause** pauses playback.
- **Stop** stops playback and unloads the track.
- The red **x** in the top-right corner, or closing the window, quits.

If the track cannot be played (the file is missing, its format is not
supported, or the audio device cannot be opened), the error is logged and the
window stays open.

## What it does not do

- The volume slider can be dragged and shows its value, but it does not change
  the playback volume.
- The "Now Playing" line and the progress bar show fixed text
  (`<Track Name>`, `01:23 / 04:56`) rather than the current track and its
  position.
- There is no way to choose a file from the window; the Play button always
  plays `media/example.mp3`.
- Pausing and then pressing Play does not resume; it restarts the track.

## Using it from Python

- `tunedeck.events` has `EventType` (`PLAY`, `PAUSE`, `STOP`,
  `VOLUME_CHANGE`, `TRACK_CHANGE`, `QUIT`) and `EventSystem`. Events are
  queued with `query_event` and dispatched in the order they came in when
  `process_events` runs; events queued by a handler during that call are
  dispatched in the same call. Each event type has at most one handler, set
  with `register_event_handler` and removed with `unregister_event_handler`.
  An event with no handler prints
  `"<Name> event received but no handler registered."` to standard output.
  `clear_event_queue`, `clear_event_handlers` and `clear_all` drop pending
  events, handlers, or both; `pending` and `handler_for` let you inspect them.
- `tunedeck.player` has the abstract `Player` interface, the
  `PlayerInitStatus` enumeration, `PlayerError` (carrying a `status`) and
  `RawPlayer`. `RawPlayer.play(path)` plays a file, or `default_path` when the
  path is empty; on failure it records the status in `init_status` and raises
  `PlayerError`. `position` gives the seconds played and can be set to seek.
  `register_handlers(events)` connects Play, Pause and Stop events to the
  player. Any object with the methods of the `AudioOutput` protocol can be
  passed as `audio=` in place of pygame's mixer.
- `tunedeck.backend.Backend` owns the window: `init`, `pre_loop` (collects
  input events and clears the frame; returns False once the window is asked to
  close), `post_loop` (presents the frame at up to 60 frames a second) and
  `shutdown`.
- `tunedeck.frontend.Frontend` draws the panel with `render(surface,
  input_events)` and queues an event for each button clicked.
- `tunedeck.app.App` connects the pieces; `tunedeck.app.main` starts it and
  returns 1 if the window cannot be created.

Using the event system by itself:

    from tunedeck.events import EventSystem, EventType

    events = EventSystem()
    events.register_event_handler(EventType.PLAY, lambda: print("playing"))
    events.query_event(EventType.PLAY)
    events.process_events()   # prints "playing"

## Tests

    pip install .[test]
    pytest