"""All magic values live here — no inline literals anywhere else."""

# Settings file
DEFAULT_SETTINGS_FILE = "appsettings.json"
SETTINGS_FILE_ENV = "VISION_SETTINGS_FILE"
SETTING_ENDPOINT = "CognitiveServiceEndpoint"
SETTING_KEY = "CognitiveServiceKey"
SETTING_THUMBNAIL_PATH = "ThumbnailPath"
SETTING_HTTP_TIMEOUT = "HttpTimeout"
SETTING_FETCH_REMOTE = "FetchRemoteImages"

# Environment overrides
ENV_THUMBNAIL_PATH = "THUMBNAIL_PATH"
ENV_HTTP_TIMEOUT = "HTTP_TIMEOUT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_FETCH_REMOTE = "FETCH_REMOTE_IMAGES"

# Defaults
DEFAULT_THUMBNAIL_PATH = "thumbnail.jpg"
DEFAULT_HTTP_TIMEOUT: float = 30.0
DEFAULT_LOG_LEVEL = "INFO"

# Thumbnail request
THUMBNAIL_WIDTH = 100
THUMBNAIL_HEIGHT = 100
THUMBNAIL_SMART_CROPPING = True

# Remote image fetch
# Computer Vision rejects uploads above 4 MB.
MAX_IMAGE_BYTES = 4 * 1024 * 1024
IMAGE_CONTENT_PREFIX = "image/"

# Exit codes
EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIG = 2
EXIT_INPUT = 3
EXIT_ANALYSIS = 4
EXIT_THUMBNAIL = 5

# Prompt / report
MSG_PROMPT = "Enter a URL or a local file that you want to analyze: "
MSG_RESULTS_HEADER = "Image analysis results: "
MSG_DESCRIPTION = "Description: %s"
MSG_NO_DESCRIPTION = "No description available"
MSG_TAGS_HEADER = "Tags: "
MSG_CATEGORIES_HEADER = "Categories: "
MSG_BRANDS_HEADER = "Brands: "
MSG_OBJECTS_HEADER = "Objects in image: "
MSG_RATINGS_HEADER = "Ratings: "
MSG_ITEM = "- %s"
MSG_SCORED_ITEM = "- %s (confidence: %s)"
MSG_ADULT = "- Adult: %s"
MSG_RACY = "- Racy: %s"
MSG_GORE = "- Gore: %s"
MSG_ANALYSIS_NULL = "Image analysis failed or returned null results."

# Status / errors
MSG_INVALID_INPUT = "You must provide a valid image URL or file path."
MSG_GENERATING_THUMBNAIL = "Generating thumbnail..."
MSG_THUMBNAIL_SAVED = "Thumbnail saved in %s"
MSG_THUMBNAIL_ERROR = "Error generating thumbnail: %s"
MSG_CONFIG_ERROR = "Configuration error: %s"
MSG_ANALYSIS_ERROR = "Image analysis failed: %s"
MSG_UNEXPECTED_ERROR = "Unexpected error: %s"

# Log messages
MSG_LOG_CLIENT_READY = "Computer Vision client ready for %s"
MSG_LOG_CLASSIFIED = "Classified input as %s"
MSG_LOG_FETCHING = "Fetching remote image %s"
MSG_LOG_FETCHED = "Fetched %d bytes from %s"
MSG_LOG_ANALYZING = "→ analyze (%d bytes)"
MSG_LOG_ANALYZED = "✓ analyze (%.1fs)"
MSG_LOG_THUMBNAIL = "→ thumbnail %dx%d (smart cropping: %s)"
MSG_LOG_THUMBNAIL_DONE = "✓ thumbnail %d bytes (%.1fs)"
MSG_LOG_THUMBNAIL_WRITTEN = "Wrote %d bytes to %s"
MSG_LOG_NO_CAPTION = "Falling back: %s"
MSG_LOG_ANALYSIS_UNHANDLED = "Unhandled error during analysis"
MSG_LOG_UNHANDLED = "Unhandled error"
