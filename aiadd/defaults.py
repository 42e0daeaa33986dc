"""Default configuration values for git-aiadd"""

AI_SECTION_START = '# --- AI Development Section ---'
AI_SECTION_END = '# --- End AI Development Section ---'

GITIGNORE_FILENAME = '.gitignore'
AI_GITIGNORE_FILENAME = 'ai.gitignore'
BACKUP_SUFFIX = '.bak'
GIT_DIRNAME = '.git'
MANIFEST_FILENAME = 'package.json'
CONFIG_FILENAME = 'aiadd.yml'

DISCOVERY_SHALLOW = 'shallow'
DISCOVERY_MANIFEST = 'manifest'
DISCOVERY_STRATEGIES = (DISCOVERY_SHALLOW, DISCOVERY_MANIFEST)

DEFAULT_DISCOVERY = DISCOVERY_SHALLOW
DEFAULT_BATCH_SIZE = 100
DEFAULT_SEED_DEFAULTS = False

DEFAULT_GITIGNORE = """# AI gitignore file
ai.gitignore

# Project-specific ignores
.env
.env.local
"""

DEFAULT_AI_GITIGNORE = """# AI Development Files
*.onnx
*.pt
*.pth
*.h5
*.hdf5
*.pb
*.tflite
*.mlmodel
*.caffemodel
*.params
*.weights
*.bin
*.model

# Model directories
model/
models/
checkpoints/
weights/
pretrained/

# Training data
*.tfrecords
*.recordio
*.mindrecord
*.idx
*.rec

# Temporary files
temp.gitignore
"""
