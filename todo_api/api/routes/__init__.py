"""Route Modules — one file per REST concern; each defines its own APIRouter."""
