"""Gallery Mover -- watch a delivery directory and batch-move arrivals by alias.

Core modules:
    config    -- Application settings via pydantic-settings (.env + env vars) and
                 loguru setup. The console sink goes through the shared Console.
    store     -- YAML mapping file (delivery_car + mappings) parsed into an
                 immutable DeliveryConfig snapshot. ConfigStore publishes each
                 reload with a single reference swap; readers never lock.
    inventory -- Fresh os.scandir listing of regular files in the inbox, plus the
                 status line shared by the watcher and the status built-in.
    watcher   -- Background watchdog observer. Drains every queued creation event
                 per wake-up and reports the burst with one inventory rescan.
    commands  -- Pure classify() into a tagged Command, and the foreground
                 CommandDispatcher read-evaluate loop.
    mover     -- Per-file batch move with explicit overwrite policy. Failures are
                 collected in MoveResult, never abort the batch.
    console   -- Lock-guarded console writer ("\\r", lines, prompt redraw).
    desktop   -- Best-effort file explorer and browser launchers.
    parser    -- Ordered pattern matchers turning filename fragments into URLs.
    app       -- MoverApp wiring: initial load, watcher lifecycle, command loop.
    cli       -- Click entry point `gallery-mover`.
    cli_parse -- Click entry point `gallery-parse`.
"""

__version__ = "0.3.0"
