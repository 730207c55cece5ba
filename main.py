from liftsweep.runner import main

if __name__ == '__main__':
    # Usage: python main.py [config.yaml] [event_log.jsonl] [trajectory.png]
    main()
