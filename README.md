# xenochat

A small toolkit for building a chat collaborator that sits across many
messaging platforms. It provides:

- a platform-neutral `Message` model with `Platform`, `ContentKind` and
  `MessageContent` (`xenochat.message`);
- a `Collaborator` (`xenochat.orchestrator`) that fans a prompt out to
  every registered `ModelProvider`, screened by a keyword `SafetyGuard`
  (`xenochat.safety`), with a rule-based `Planner` (`xenochat.planner`),
  short-term `MemoryStore` (`xenochat.memory`), `PersonaProfile`
  (`xenochat.persona`) and `EmotionState` (`xenochat.emotion`);
- a `ToolRegistry` (`xenochat.tool`), `KeywordTrigger` (`xenochat.trigger`)
  and `PluginRegistry` (`xenochat.plugin`);
- bounded-queue platform adapters (`xenochat.adapter`, `xenochat.platforms`,
  `xenochat.regional`) that can also import authorized exports in the
  `sender|room|text` line format;
- a `OneBotTransport` (`xenochat.protocol`) that refuses to send while
  disconnected;
- `AuditEvent` JSON lines (`xenochat.audit`), thread-safe `RuntimeMetrics`
  (`xenochat.telemetry`) and master key lookup (`xenochat.masterkey`).

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Library use

```python
from xenochat.orchestrator import Collaborator, CompletionRequest, ModelProvider

class Echo(ModelProvider):
    def name(self):
        return "echo"

    def complete(self, request):
        return f"echo:{request.prompt}"

collaborator = Collaborator()
collaborator.register(Echo())
print(collaborator.respond(CompletionRequest(prompt="hello")))
# echo [Xenochat]: echo:hello
```

A prompt containing a blocking marker such as "reveal api key" gets
`Request blocked by safety guard.`; with no providers registered the answer
is `No model provider is configured.`

Importing an export into an adapter:

```python
from xenochat.platforms import DiscordAdapter

adapter = DiscordAdapter()
records = adapter.parse_authorized_export("u1|room|hello")
adapter.ingest_imported_records(records)
print(adapter.checkpoint())  # discord:1
print(adapter.next_outbound().id)  # import-discord-0
```

A malformed export line raises `ExportFormatError`; pushing into a full
blocking queue raises `QueueFullError`. `default_adapters()` returns a fresh
adapter for each of the seventeen supported platforms.

Keyword triggers:

```python
from xenochat.trigger import KeywordTrigger

trigger = KeywordTrigger()
trigger.register("deploy", "Deployment checklist")
rule = trigger.check("Please DEPLOY this release")
print(rule.response_template)  # Deployment checklist
```

## Master key lookup

`xenochat.masterkey.resolve_master_key()` returns a `ResolvedMasterKey`
from the `XENOCHAT_MASTER_KEY` environment variable if it is set and not
blank. Otherwise, on macOS, it asks the Keychain through the `security`
tool, using `XENOCHAT_KEYCHAIN_SERVICE` (default `xenochat.master-key`) and
`XENOCHAT_KEYCHAIN_ACCOUNT` (default the current user, then `xenochat`).
It returns `None` when no key is found and raises `MasterKeyResolveError`
when the Keychain lookup fails for another reason.

## What this package does not do

- It has no command-line tool and no HTTP server.
- It does not encrypt or decrypt secrets; it only locates the master key.
- It does not read configuration files.
- Adapters hold messages in memory queues only; they do not connect to
  any real chat service, and nothing is stored on disk.