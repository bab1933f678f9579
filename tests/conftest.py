"""Shared test fixtures for codeblock tests."""

import textwrap

import pytest


@pytest.fixture
def migraine_transcript():
    """The five-line install/run sample from the Migraine home page."""
    return textwrap.dedent("""\
        # Install Migraine
        brew install migraine

        # Run a workflow with variables
        migraine run my_workflow -v PROJECT_PATH=/path/to/project
    """)


@pytest.fixture
def pipeline_script():
    """A script exercising strings, pipes, redirections and keywords."""
    return textwrap.dedent("""\
        export PATH="$HOME/bin:$PATH"
        if [ -d build ]; then rm -rf build; fi
        echo "hello $USER" | grep -i hello > out.txt 2>&1
        cat <<EOF
        multi-line body
        EOF
    """)


@pytest.fixture
def classes():
    """Return the token classes of a StyledLine/RenderedLine as strings."""
    def _classes(line):
        return [t.token_class.value for t in line.tokens]
    return _classes
