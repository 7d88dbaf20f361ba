"""
Core classpath model.

- expand: path string splitting and star expansion
- context: naming and filtering policy shared by a classpath tree
- classpath: class representations and the package node hierarchy
- assembler: the full boot/ext/user/codebase/source classpath
- manifest: configuration loading
"""
