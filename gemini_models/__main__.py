from gemini_models.cli import main

main()
