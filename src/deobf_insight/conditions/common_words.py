"""Vocabulary that marks a short name as meaningful rather than obfuscated."""

_METHOD_TERMS = (
    "get", "set", "is", "has", "can", "add", "put", "remove", "clear", "size",
    "init", "start", "stop", "run", "call", "execute", "invoke", "apply",
    "read", "write", "load", "save", "open", "close", "create", "destroy",
    "show", "hide", "enable", "disable", "update", "refresh", "reset",
    "parse", "format", "convert", "encode", "decode", "encrypt", "decrypt",
    "send", "receive", "post", "fetch", "request", "response",
    "bind", "unbind", "attach", "detach", "connect", "disconnect",
    "register", "unregister", "subscribe", "unsubscribe",
    "validate", "verify", "check", "test", "compare", "equals",
    "copy", "clone", "merge", "split", "join", "concat",
    "find", "search", "filter", "sort", "reverse", "shuffle",
    "log", "debug", "info", "warn", "error", "trace",
)

_FIELD_TERMS = (
    "id", "key", "value", "name", "type", "data", "text", "title", "label",
    "url", "uri", "path", "file", "dir", "root", "home", "base",
    "min", "max", "count", "total", "sum", "avg", "index", "offset", "length",
    "width", "height", "x", "y", "z", "top", "left", "right", "bottom",
    "red", "green", "blue", "alpha", "color", "font", "style",
    "enabled", "visible", "active", "valid", "ready", "done", "busy",
    "parent", "child", "next", "prev", "first", "last", "current",
    "input", "output", "source", "target", "origin", "dest",
    "user", "admin", "guest", "owner", "author", "creator",
    "time", "date", "year", "month", "day", "hour", "minute", "second",
    "tag", "flag", "mode", "state", "status", "code", "result",
    "list", "map", "array", "queue", "stack", "tree", "graph",
    "config", "setting", "option", "param", "arg",
)

_ANDROID_TERMS = (
    "view", "layout", "widget", "button", "image", "icon", "drawable",
    "activity", "fragment", "service", "receiver", "provider",
    "intent", "bundle", "cursor", "adapter", "holder",
    "context", "app", "application", "system", "manager",
    "handler", "thread", "task", "job", "worker", "async",
    "listener", "callback", "observer", "event", "action",
    "menu", "item", "dialog", "toast", "snackbar", "popup",
    "recycler", "scroll", "pager", "tab", "toolbar", "fab",
    "notification", "alarm", "broadcast", "permission",
)

_CLASS_TERMS = (
    "util", "utils", "factory", "builder", "parser", "impl", "abstract",
    "default", "custom", "simple", "model", "entity", "bean", "dto", "vo",
    "po", "dao", "repository", "controller", "presenter", "viewmodel",
    "module", "component", "inject", "scope", "qualifier",
    "mock", "stub", "fake", "spy", "helper",
)

_SHORTHAND_TERMS = (
    "on", "do", "new", "old", "tmp", "temp", "obj", "ref", "ptr",
    "ctx", "msg", "cmd", "evt", "err", "ex", "e", "i", "j", "k", "n", "m",
    "sb", "db", "io", "ui", "rx", "tx",
)

# Lowercase; lookups lowercase the name first
COMMON_TERMS = frozenset(
    _METHOD_TERMS + _FIELD_TERMS + _ANDROID_TERMS + _CLASS_TERMS + _SHORTHAND_TERMS
)

# camelCase verb prefixes: matched when the next character is uppercase
COMMON_PREFIXES = ("get", "set", "is", "has", "can", "on", "do", "new")

COMMON_SUFFIXES = (
    "Listener", "Callback", "Handler", "Adapter", "Helper",
    "Manager", "Factory", "Builder", "Impl", "Activity", "Fragment",
    "Service", "Receiver", "Provider", "View", "Layout", "Model",
)
