from prcampaign.cli import main

main()
