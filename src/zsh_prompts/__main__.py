from zsh_prompts.cli import main

main()
