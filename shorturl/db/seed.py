from shorturl.db.Models.models import URLEntry

# Demo entries every fresh store starts with
SEED_ENTRIES = (
    URLEntry(id="ads45s", url="https://ballerina.io"),
    URLEntry(id="sdf45s", url="https://ballerina.io/learn/api-docs/ballerina/http.html"),
    URLEntry(id="xyz123", url="https://example.com"),
)
