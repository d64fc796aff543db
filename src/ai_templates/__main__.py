from ai_templates import main

main()
